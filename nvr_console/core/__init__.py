from .config import ENV_FILE, Settings, get_settings, load_environment

__all__ = ["ENV_FILE", "Settings", "get_settings", "load_environment"]
