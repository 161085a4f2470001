from .ini_config_service import IniConfigService

__all__ = ["IniConfigService"]
