import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMasking:
    def test_masks_sensitive_pairs_inside_repr(self) -> None:
        masked = mask_sensitive("{'card_number': '4242424242424242', 'method': 'card'}")

        assert '4242424242424242' not in masked
        assert MASK in masked
        assert "'method': 'card'" in masked

    def test_leaves_plain_values_untouched(self) -> None:
        data = {'title': 'Concert'}

        assert mask_sensitive(data) is data

    def test_masks_by_keyword(self) -> None:
        assert should_mask_keyword('token', 'abc') == MASK
        assert should_mask_keyword('email', 'a@example.com') == 'a@example.com'

    def test_truncates_long_content(self) -> None:
        truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))

        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')


@pytest.mark.unit
class TestLoggerIO:
    @pytest.mark.asyncio
    async def test_async_function_result_passes_through(self) -> None:
        @Logger.io
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(1, 2) == 3

    def test_sync_function_result_passes_through(self) -> None:
        @Logger.io(truncate_content=True)
        def greet(name: str) -> str:
            return f'hi {name}'

        assert greet('there') == 'hi there'

    @pytest.mark.asyncio
    async def test_exceptions_are_reraised(self) -> None:
        @Logger.io
        async def fail() -> None:
            raise DomainError('bad input')

        with pytest.raises(DomainError, match='bad input'):
            await fail()
