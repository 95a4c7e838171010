from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable

from hexview.core.codepage import CODEPAGES
from hexview.core.settings import Settings


@dataclass(frozen=True)
class SettingSpec:
    key: str
    attr: str
    type_name: str
    parse: Callable[[list[str]], object]
    format: Callable[[object], str]
    validate: Callable[[object], bool] | None = None


def list_specs() -> list[SettingSpec]:
    return list(_SPECS)


def get_setting(settings: Settings, key: str) -> object | None:
    spec = _spec_by_key().get(key)
    if not spec:
        return None
    return getattr(settings, spec.attr)


def set_setting(settings: Settings, key: str, tokens: list[str]) -> tuple[bool, str]:
    spec = _spec_by_key().get(key)
    if not spec:
        return False, f"unknown setting: {key}"
    try:
        value = spec.parse(tokens)
    except ValueError as exc:
        return False, str(exc) or "invalid value"
    if spec.validate and not spec.validate(value):
        return False, "invalid value"
    setattr(settings, spec.attr, value)
    return True, spec.format(value)


def format_setting(settings: Settings, key: str) -> str | None:
    spec = _spec_by_key().get(key)
    if not spec:
        return None
    return spec.format(getattr(settings, spec.attr))


def reset_settings(settings: Settings) -> None:
    defaults = Settings()
    for field in fields(Settings):
        setattr(settings, field.name, getattr(defaults, field.name))


def _spec_by_key() -> dict[str, SettingSpec]:
    return {spec.key: spec for spec in _SPECS}


def _parse_int(tokens: list[str]) -> int:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    try:
        return int(tokens[0], 0)
    except ValueError as exc:
        raise ValueError("invalid integer") from exc


def _parse_codepage(tokens: list[str]) -> str:
    if len(tokens) != 1:
        raise ValueError("expected one value")
    name = tokens[0].strip().lower()
    if name not in CODEPAGES:
        choices = ", ".join(sorted(CODEPAGES.keys()))
        raise ValueError(f"unknown codepage (choices: {choices})")
    return name


def _fmt_value(value: object) -> str:
    return str(value)


def _fmt_hex(value: object) -> str:
    return f"0x{value:X}"


def _is_int_nonneg(value: object) -> bool:
    # bool is an int subclass but never a valid width or offset
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_codepage(value: object) -> bool:
    return isinstance(value, str) and value in CODEPAGES


_SPECS: list[SettingSpec] = [
    SettingSpec(
        key="row_width",
        attr="row_width",
        type_name="int",
        parse=_parse_int,
        format=_fmt_value,
        validate=_is_int_nonneg,
    ),
    SettingSpec(
        key="address_offset",
        attr="address_offset",
        type_name="int",
        parse=_parse_int,
        format=_fmt_hex,
        validate=_is_int_nonneg,
    ),
    SettingSpec(
        key="codepage",
        attr="codepage",
        type_name="codepage",
        parse=_parse_codepage,
        format=_fmt_value,
        validate=_is_codepage,
    ),
]
