APP_ORG = "VaultExport"
APP_NAME = "Vault Exporter"

CSS_EXPORT = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
h1,h2,h3,h4,h5 { margin-top: 1.2em; }
pre { padding:.75rem; overflow:auto; border-radius:8px; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
blockquote { border-left:4px solid var(--border); margin:1em 0; padding:.25em .75em; color:var(--muted); }
table { border-collapse: collapse; }
th, td { border:1px solid var(--border); padding:.4rem .6rem; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
hr { border:none; border-top:1px solid var(--border); margin:1.5rem 0; }
ul,ol { padding-left:1.5rem; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

FRAGMENT_TEMPLATE = """<section class="note" id="{anchor}">
<h1>{title}</h1>
{body}
</section>
"""

MAP_HEADER = (
    "<!doctype html>\n"
    "<html>\n"
    "    <head>\n"
    "        <title>Map export - {vault_name}</title>\n"
    "        <meta charset='utf-8'/>\n"
    "        <style>\n</style>\n"
    "    </head>\n"
    "    <body>\n"
)
MAP_FOOTER = "</body>\n</html>"
DEFAULT_MAP_FILENAME = "map.html"

SETTINGS_PANDOC_PATH = "export/pandoc_path"
SETTINGS_PDFLATEX_PATH = "export/pdflatex_path"
SETTINGS_OUTPUT_FOLDER = "export/output_folder"
SETTINGS_EXTRA_ARGUMENTS = "export/extra_arguments"
SETTINGS_LAST_ACTIVE = "workspace/last_active"

NOTICE_ERROR_MS = 15000
