from __future__ import annotations

from collections.abc import Mapping

from vaultexport.domain.formats import OutputFormat, is_supported_input
from vaultexport.services.capabilities import CONVERTER, TYPESETTING


def can_export(
    fmt: OutputFormat, active_path: str | None, capabilities: Mapping[str, str | None]
) -> bool:
    """Whether `fmt` can be produced right now for the active document."""
    if fmt.needs_converter and not capabilities.get(CONVERTER):
        return False
    if fmt.needs_typesetting and not capabilities.get(TYPESETTING):
        return False
    if not active_path:
        return False
    return is_supported_input(active_path)
