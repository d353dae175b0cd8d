from typing import Optional, Union


def to_bool(
    input: Union[str, bool, None], default: Optional[bool] = None
) -> Optional[bool]:
    """
    Parse an environment-style boolean.
    Unset (None) falls back to `default`.
    """
    if isinstance(input, bool):
        return input
    elif input is None:
        return default
    elif input in ("True", "true", "1"):
        return True
    elif input in ("False", "false", "0"):
        return False
    else:
        raise ValueError(f"Invalid bool value: {repr(input)}")
