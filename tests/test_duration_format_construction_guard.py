"""Tests for the DurationFormat direct construction guard.

DurationFormat instances must come from DurationFormat.create(); calling the
class directly is an invocation error, like calling Intl.DurationFormat
without ``new``.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from durationformat import DurationFormat, DurationFormatTypeError
from durationformat.diagnostics import DiagnosticCode, ErrorCategory
from durationformat.runtime import resolve_duration_format
from tests.helpers.locale_data import FakeLocaleDataProvider


class TestDurationFormatDirectConstructionGuard:
    """__init__ rejects calls without the factory token."""

    def test_direct_construction_without_token_raises_typeerror(
        self, fake_provider: FakeLocaleDataProvider
    ) -> None:
        """Omitting the token raises, with a message pointing at create()."""
        spec = resolve_duration_format("en", provider=fake_provider)

        with pytest.raises(TypeError) as exc_info:
            DurationFormat(spec, fake_provider)

        error_msg = str(exc_info.value)
        assert "DurationFormat.create()" in error_msg
        assert "direct construction" in error_msg

    def test_direct_construction_with_wrong_token_raises_typeerror(
        self, fake_provider: FakeLocaleDataProvider
    ) -> None:
        """Only the exact sentinel object is accepted."""
        spec = resolve_duration_format("en", provider=fake_provider)

        with pytest.raises(DurationFormatTypeError) as exc_info:
            DurationFormat(spec, fake_provider, _factory_token=object())

        assert exc_info.value.category is ErrorCategory.TYPE
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DIRECT_CONSTRUCTION

    def test_factory_method_works(self, fake_provider: FakeLocaleDataProvider) -> None:
        """create() passes the guard."""
        fmt = DurationFormat.create("en", provider=fake_provider)

        assert isinstance(fmt, DurationFormat)
        assert fmt.locale == "en"

    def test_instances_have_no_dict(self, fake_provider: FakeLocaleDataProvider) -> None:
        """Slots keep instances closed to new attributes."""
        fmt = DurationFormat.create("en", provider=fake_provider)

        with pytest.raises(AttributeError):
            fmt.extra = 1  # type: ignore[attr-defined]
