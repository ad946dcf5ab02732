from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .curves import Curve

curve_registry: dict[str, type["Curve"]] = {}
key_registry: dict[str, type["Curve"]] = {}


def register_curve(kind: str, key: str):
    """
    Register a curve class under its kind tag and the key that creates it.
    """
    def _decorator(cls: type["Curve"]) -> type["Curve"]:
        if not kind or kind in curve_registry:
            raise ValueError(f"Invalid or duplicate curve kind '{kind}'")
        if len(key) != 1 or key in key_registry:
            raise ValueError(f"Invalid or duplicate creation key '{key}'")
        cls.kind = kind
        curve_registry[kind] = cls
        key_registry[key] = cls
        return cls
    return _decorator
