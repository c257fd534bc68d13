"""
core/lanes.py

Упакованное представление наклеек: один int, фиксированные битовые дорожки.

Каждая наклейка (facelet) занимает дорожку шириной `width` бит.
Цвет c хранится как код c + 1, поэтому нулевой код (и все коды больше
числа цветов) зарезервированы: такое значение при декодировании означает
испорченное состояние.

Сравнение, хеширование и копирование состояния — операции над одним int.
Ход компилируется в MaskedPermutation: перестановка дорожек группируется
по величине сдвига, и каждая группа применяется одной маской и одним сдвигом.
"""

from typing import Dict, Iterable, List, Sequence, Tuple

from utils.error_handling import CorruptStateError


LanePairs = Sequence[Tuple[int, int]]


def copy_masked(dst_bits: int, src_bits: int, mask: int) -> int:
    """Копирует биты src под маской в dst (позиции битов совпадают)."""
    return (dst_bits & ~mask) | (src_bits & mask)


class MaskedPermutation:
    """
    Скомпилированная перестановка дорожек.

    keep_mask — биты, которые ход не трогает.
    terms — пары (маска источника, сдвиг в битах); отрицательный сдвиг — вправо.
    """
    __slots__ = ('keep_mask', 'terms')

    def __init__(self, keep_mask: int, terms: Tuple[Tuple[int, int], ...]):
        self.keep_mask = keep_mask
        self.terms = terms

    def __call__(self, bits: int) -> int:
        out = bits & self.keep_mask
        for mask, shift in self.terms:
            if shift >= 0:
                out |= (bits & mask) << shift
            else:
                out |= (bits & mask) >> -shift
        return out

    def __len__(self) -> int:
        return len(self.terms)

    def __repr__(self) -> str:
        return f"MaskedPermutation({len(self.terms)} terms)"


class LaneLayout:
    """Раскладка дорожек: количество дорожек и число допустимых цветов."""
    __slots__ = ('lane_count', 'n_values', 'width', 'lane_mask', 'full_mask')

    def __init__(self, lane_count: int, n_values: int):
        if lane_count <= 0:
            raise ValueError("lane_count must be positive")
        if n_values <= 0:
            raise ValueError("n_values must be positive")
        self.lane_count = lane_count
        self.n_values = n_values
        # коды 1..n_values, код 0 всегда зарезервирован
        self.width = n_values.bit_length()
        self.lane_mask = (1 << self.width) - 1
        self.full_mask = (1 << (self.width * lane_count)) - 1

    def lane_bits(self, lane: int) -> int:
        """Маска битов одной дорожки."""
        self._check_lane(lane)
        return self.lane_mask << (lane * self.width)

    def mask_of(self, lanes: Iterable[int]) -> int:
        mask = 0
        for lane in lanes:
            mask |= self.lane_bits(lane)
        return mask

    def get(self, bits: int, lane: int) -> int:
        """Читает цвет дорожки: маска и сдвиг на lane * width."""
        self._check_lane(lane)
        code = (bits >> (lane * self.width)) & self.lane_mask
        if code == 0 or code > self.n_values:
            raise CorruptStateError(
                f"lane {lane} holds reserved code {code:#x}"
            )
        return code - 1

    def set(self, bits: int, lane: int, value: int) -> int:
        """Записывает цвет: очищает дорожку, затем OR нового кода."""
        self._check_lane(lane)
        if not 0 <= value < self.n_values:
            raise CorruptStateError(
                f"value {value} cannot be encoded (expected 0..{self.n_values - 1})"
            )
        shift = lane * self.width
        return (bits & ~(self.lane_mask << shift)) | ((value + 1) << shift)

    def encode(self, values: Sequence[int]) -> int:
        if len(values) != self.lane_count:
            raise ValueError(
                f"expected {self.lane_count} values, got {len(values)}"
            )
        bits = 0
        for lane, value in enumerate(values):
            bits = self.set(bits, lane, value)
        return bits

    def decode(self, bits: int) -> List[int]:
        return [self.get(bits, lane) for lane in range(self.lane_count)]

    def permute(self, bits: int, pairs: LanePairs) -> int:
        """
        Медленная эталонная перестановка: сначала читаем все источники,
        затем пишем все приёмники. new[dst] = old[src].
        """
        values = [(dst, self.get(bits, src)) for src, dst in pairs]
        for dst, value in values:
            bits = self.set(bits, dst, value)
        return bits

    def compile(self, pairs: LanePairs) -> MaskedPermutation:
        """Группирует пары (src, dst) по сдвигу и строит MaskedPermutation."""
        groups: Dict[int, int] = {}
        moved = 0
        targets = set()
        for src, dst in pairs:
            if dst in targets:
                raise ValueError(f"lane {dst} is written twice")
            targets.add(dst)
            if src == dst:
                continue
            shift = (dst - src) * self.width
            groups[shift] = groups.get(shift, 0) | self.lane_bits(src)
            moved |= self.lane_bits(dst)

        terms = tuple((groups[shift], shift) for shift in sorted(groups))
        return MaskedPermutation(self.full_mask & ~moved, terms)

    def _check_lane(self, lane: int) -> None:
        if not 0 <= lane < self.lane_count:
            raise IndexError(f"lane {lane} out of range 0..{self.lane_count - 1}")

    def __repr__(self) -> str:
        return (f"LaneLayout(lanes={self.lane_count}, values={self.n_values}, "
                f"width={self.width})")
