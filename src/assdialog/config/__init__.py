from assdialog.config.loader import load_config
from assdialog.config.schema import ConversionConfig, FieldLimitsModel

__all__ = ["ConversionConfig", "FieldLimitsModel", "load_config"]
