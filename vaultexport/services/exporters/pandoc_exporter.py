from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

from vaultexport.domain.errors import ConversionError
from vaultexport.domain.formats import OutputFormat
from vaultexport.domain.interfaces import IExporter
from vaultexport.services.capabilities import CONVERTER, TYPESETTING

logger = logging.getLogger(__name__)


class PandocExporter(IExporter):
    """
    Converts rendered HTML with pandoc. HTML goes in on stdin; pandoc writes `out_path`.

    Tool paths are read from the capability map at export time, so a settings
    change followed by a capability refresh is picked up without re-registering.
    """

    def __init__(
        self,
        fmt: OutputFormat,
        capabilities: Callable[[], Mapping[str, str | None]],
        extra_arguments: Callable[[], list[str]] = list,
        timeout_s: float = 300.0,
    ) -> None:
        if not fmt.needs_converter:
            raise ValueError(f"{fmt.name} does not go through pandoc")
        self.fmt = fmt
        self.name = fmt.name
        self.label = fmt.label
        self._capabilities = capabilities
        self._extra_arguments = extra_arguments
        self._timeout_s = timeout_s

    def build_command(self, out_path: Path) -> list[str]:
        caps = self._capabilities()
        pandoc = caps.get(CONVERTER)
        if not pandoc:
            raise ConversionError("pandoc is not available; set its path in the settings")
        args = [pandoc, "--from", "html", "--to", self.fmt.pandoc_format or self.fmt.name]
        args += ["--output", str(out_path)]
        if self.fmt.needs_typesetting:
            engine = caps.get(TYPESETTING)
            if not engine:
                raise ConversionError("pdflatex is not available; set its path in the settings")
            args.append(f"--pdf-engine={engine}")
        if self.fmt.name in ("revealjs", "epub", "docx", "odt", "pptx"):
            args.append("--standalone")
        args += self._extra_arguments()
        return args

    def export(self, html: str, out_path: Path) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        cmd = self.build_command(out_path)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                input=html,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self._timeout_s,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ConversionError(f"pandoc timed out after {self._timeout_s:.0f}s") from e
        except OSError as e:
            raise ConversionError(f"Could not start pandoc: {e}") from e

        if proc.stderr.strip():
            logger.warning(proc.stderr.strip())
        if proc.returncode != 0:
            raise ConversionError(
                f"pandoc exited with code {proc.returncode}: {proc.stderr.strip()}",
                returncode=proc.returncode,
                stderr=proc.stderr,
            )
