"""Prime Cache — общий append-only кэш простых чисел по индексу.

Индекс → простое: 0 → 2, 1 → 3, 2 → 5, ...

ИНВАРИАНТЫ:
- Последовательность строго возрастает и непрерывна (ни одно простое не пропущено)
- Кэш только растёт: записи не изменяются и не инвалидируются
- Идемпотентная сходимость: любые два вызова, вычисляющие запись i,
  получают одно и то же значение (successor детерминирован)

Поэтому конкурентное расширение корректно без блокировки: повторное
вычисление допустимо, а запись публикуется через dict.setdefault, так что
первая опубликованная запись остаётся навсегда. Блокировка (use_lock)
лишь убирает дублирующую работу.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from osabie_numeric.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrimeCacheConfig:
    """Конфигурация Prime Cache.

    use_lock — сериализовать расширение (оптимизация, не условие корректности).
    """

    use_lock: bool = True


class PrimeCache:
    """Append-only индексированный кэш простых чисел.

    Интерфейс:
    - get(i): i-е простое (0-indexed), с расширением при необходимости
    - extend_to(i): гарантировать наличие записи i
    - snapshot(): неизменяемая копия текущего префикса
    """

    def __init__(
        self,
        successor: Callable[[int], int],
        seed: Sequence[int] = (2,),
        config: Optional[PrimeCacheConfig] = None,
    ):
        """
        Args:
            successor: детерминированная функция "следующее простое после p"
            seed: начальный непустой префикс последовательности
            config: конфигурация кэша
        """
        if not seed:
            raise ValueError("seed must contain at least one prime")

        self._successor = successor
        self.config = config or PrimeCacheConfig()
        self._lock: Optional[threading.Lock] = threading.Lock() if self.config.use_lock else None

        # Ключи всегда образуют непрерывный диапазон 0..len-1
        self._entries: Dict[int, int] = dict(enumerate(seed))

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, index: int) -> int:
        """i-е простое число (0-indexed)."""
        if index < 0:
            raise IndexError(f"prime index must be non-negative, got {index}")

        entry = self._entries.get(index)
        if entry is not None:
            return entry

        self.extend_to(index)
        return self._entries[index]

    def extend_to(self, index: int) -> None:
        """Последовательно расширить кэш, пока в нём нет записи index."""
        initial_length = len(self._entries)

        while len(self._entries) <= index:
            if self._lock is not None:
                with self._lock:
                    self._extend_once()
            else:
                self._extend_once()

        if len(self._entries) > initial_length:
            logger.debug(
                "prime cache extended from %d to %d entries",
                initial_length,
                len(self._entries),
            )

    def _extend_once(self) -> None:
        length = len(self._entries)
        candidate = self._successor(self._entries[length - 1])
        # Первая опубликованная запись побеждает; конкуренты вычислили то же значение
        self._entries.setdefault(length, candidate)

    def snapshot(self) -> tuple[int, ...]:
        """Копия текущего префикса кэша."""
        return tuple(self._entries[i] for i in range(len(self._entries)))
