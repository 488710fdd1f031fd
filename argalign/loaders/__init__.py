from .config_loader import load_config
from .report_loader import JsonReportLoader, YamlReportLoader, render_text, to_json, to_yaml

__all__ = [
    "JsonReportLoader",
    "YamlReportLoader",
    "load_config",
    "render_text",
    "to_json",
    "to_yaml",
]
