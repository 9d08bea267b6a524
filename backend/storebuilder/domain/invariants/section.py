from storebuilder.domain.sections.configs import shape_for
from storebuilder.domain.sections.exceptions import InvalidConfig
from .exceptions import InvariantViolation

PRIMITIVE_TYPES = (str, int, float, bool, type(None))
PLACEMENTS = ("above", "below")


def assert_contiguous_order(sections):
    orders = [section["sort_order"] for section in sections]
    expected = list(range(len(orders)))

    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 0: {orders}"
        )


def assert_config_shape(section_type, config):
    if not isinstance(config, dict):
        raise InvalidConfig(f"{section_type} config must be an object")

    shape = shape_for(section_type)
    if shape is None:
        # Generic fallback: flat map of primitives
        bad_keys = [key for key, value in config.items() if not isinstance(value, PRIMITIVE_TYPES)]
        if bad_keys:
            raise InvalidConfig(
                f"{section_type} config only accepts primitive values (offending keys: {sorted(bad_keys)})"
            )
        return

    missing = sorted(shape.__required_keys__ - config.keys())
    if missing:
        raise InvalidConfig(
            f"{section_type} config is missing required fields: {missing}"
        )


def assert_placement(placement):
    if placement not in PLACEMENTS:
        raise InvalidConfig(
            f"Placement must be one of {list(PLACEMENTS)}, got {placement!r}"
        )
