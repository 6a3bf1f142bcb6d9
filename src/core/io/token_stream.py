"""
Token Stream — чтение whitespace-разделённых токенов

Аналог istream >> value: токены читаются лениво, посимвольно. Поток
никогда не продвигается дальше последнего прочитанного токена, поэтому
несколько последовательных read() над одним потоком (TextIO или
TokenReader) потребляют последовательные токены без потерь.
"""

import io
from typing import Iterator, TextIO, Union

from src.core.contracts.errors import TokenStreamError


class TokenReader:
    """
    Ленивый читатель токенов поверх текстового потока.

    После каждого токена поглощается ровно один разделитель; остаток
    потока остаётся нетронутым для следующего читателя.

    Args:
        source: Текстовый поток (TextIO) или строка
    """

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        chars: list[str] = []
        while True:
            ch = self._stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if chars:
                    break
                continue
            chars.append(ch)

        if not chars:
            raise StopIteration
        return "".join(chars)

    def take(self, count: int) -> list[str]:
        """
        Чтение ровно count токенов.

        Raises:
            TokenStreamError: Если поток закончился раньше
        """
        tokens = []
        for _ in range(count):
            try:
                tokens.append(next(self))
            except StopIteration:
                raise TokenStreamError(
                    f"Token stream exhausted: expected {count} tokens, got {len(tokens)}"
                ) from None
        return tokens


TokenSource = Union[str, TextIO, TokenReader]


def as_token_reader(source: TokenSource) -> TokenReader:
    """Нормализация str | TextIO | TokenReader в TokenReader."""
    if isinstance(source, TokenReader):
        return source
    return TokenReader(source)


def convert_tokens(tokens: list[str], dtype: type) -> list:
    """
    Конверсия токенов в тип элемента.

    Raises:
        TokenStreamError: Если токен не конвертируется через dtype(token)
    """
    values = []
    for token in tokens:
        try:
            values.append(dtype(token))
        except (TypeError, ValueError, ArithmeticError) as e:
            raise TokenStreamError(
                f"Cannot convert token {token!r} to {dtype.__name__}: {e}"
            ) from e
    return values
