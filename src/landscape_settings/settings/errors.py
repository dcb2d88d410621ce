from __future__ import annotations

from typing import Optional


class SettingsError(Exception):
    """Base class for every failure raised while getting landscape settings."""


class SettingsSourceError(SettingsError):
    pass


class SettingsSourceNotProvidedError(SettingsSourceError):
    pass


class SettingsReadError(SettingsSourceError):
    pass


class SettingsFetchError(SettingsSourceError):
    pass


class UnexpectedStatusError(SettingsFetchError):
    def __init__(self, status_code: int, url: Optional[str] = None) -> None:
        super().__init__(f"unexpected status code getting landscape settings file: {status_code}")
        self.status_code = status_code
        self.url = url


class SettingsDecodeError(SettingsSourceError):
    pass


class SettingsParseError(SettingsError):
    pass


class SettingsValidationError(SettingsError):
    pass


class SettingsRuleError(SettingsError):
    """A single validation rule violation. Contextual errors chain the inner one as __cause__."""


def format_error_chain(exc: BaseException) -> str:
    messages: list[str] = []
    cur: Optional[BaseException] = exc
    while cur is not None:
        text = str(cur) or type(cur).__name__
        if not messages or messages[-1] != text:
            messages.append(text)
        cur = cur.__cause__
    return ": ".join(messages)
