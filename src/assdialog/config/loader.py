from pathlib import Path

from pydantic import ValidationError

from assdialog.config.schema import ConversionConfig
from assdialog.errors import ConfigError


def load_config(path: Path) -> ConversionConfig:
    """Read the conversion settings stored in a JSON file at *path*.

    The file holds what the command line would otherwise pass as flags: the
    input and output paths, the old and new frame rates used for retiming, the
    output format string, strict and single-pass switches and the field
    capacities.  Omitted keys take their defaults.  Unreadable files, broken
    JSON and invalid values all raise ConfigError naming the offending fields.
    """
    try:
        return ConversionConfig.model_validate_json(
            path.read_text(encoding="utf-8")
        )
    except ValidationError as e:
        field_errors = "; ".join(
            f"{' -> '.join(str(x) for x in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(path, f"Schema validation failed: {field_errors}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(path, str(e)) from e
