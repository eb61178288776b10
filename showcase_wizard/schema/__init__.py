from showcase_wizard.schema.parser import extract_params, load_showcase, parse_showcase

__all__ = ["extract_params", "load_showcase", "parse_showcase"]
