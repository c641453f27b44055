"""Результат разметки патчей по рамке изображения."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PatchRegions:
    """Индексы растягиваемых колонок/строк (0-based, относительно внутреннего изображения).

    ``top``/``left`` управляют растяжением, ``bottom``/``right`` только читаются
    из рамки и на результат не влияют.
    """
    top: Tuple[int, ...] = ()
    left: Tuple[int, ...] = ()
    bottom: Tuple[int, ...] = ()
    right: Tuple[int, ...] = ()

    def describe(self) -> str:
        """Короткая строка для UI и логов."""
        return (
            f"верх: {_fmt(self.top)}; лево: {_fmt(self.left)}; "
            f"низ: {_fmt(self.bottom)}; право: {_fmt(self.right)}"
        )


def _fmt(indices: Tuple[int, ...]) -> str:
    if not indices:
        return "—"
    return ", ".join(str(i) for i in indices)
