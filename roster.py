from collections.abc import MutableSequence
from typing import Iterable, Iterator, List, Tuple

from logging_setup import logger
from Models.Participant import Participant


class EmptyInputError(ValueError):
    """Boş bir katılımcı dizisi üzerinde ilk elemana erişilmeye çalışıldığında fırlatılır."""


class OrderedRoster:
    """
    Katılımcıları ekleme sırasıyla tutar.

    UYARI: view() iç listenin kendisini döndürür, kopyasını değil. Dönen listeyi
    sıralayan her çağıran roster'ın sırasını da değiştirir. Senkronize edilmemiş
    paylaşılan durum sızıntısı bilerek korunur; güvenli okuma için snapshot()
    kullanılmalıdır.
    """

    def __init__(self, initial: Iterable[Participant] = ()):
        self._participants: List[Participant] = list(initial)
        logger.debug(f"Roster oluşturuldu. Katılımcı sayısı: {len(self._participants)}")

    @classmethod
    def create(cls, initial: Iterable[Participant]) -> "OrderedRoster":
        return cls(initial)

    def view(self) -> List[Participant]:
        return self._participants

    def snapshot(self) -> Tuple[Participant, ...]:
        return tuple(self._participants)

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants)

    def __repr__(self) -> str:
        return f"OrderedRoster({self._participants!r})"


def first_by_sorted_name_descending(sequence: MutableSequence[Participant]) -> Participant:
    """
    Verilen diziyi isme göre azalan sırada yerinde sıralar ve ilk elemanı döndürür.

    Sıralama kararlıdır (aynı isimler giriş sırasını korur) ve Unicode kod
    noktası karşılaştırmasını kullanır. Dizi parametresi değiştirilir; bu
    dizi bir roster'ın view() çıktısıysa roster da değişmiş olur.
    """
    if not sequence:
        logger.warning("Boş katılımcı listesi sıralanamaz.")
        raise EmptyInputError("first_by_sorted_name_descending: katılımcı listesi boş.")
    if not isinstance(sequence, MutableSequence):
        raise TypeError(f"Yerinde sıralama için değiştirilebilir dizi gerekli, {type(sequence).__name__} verildi.")

    # sorted() with reverse=True keeps equal keys in input order
    sequence[:] = sorted(sequence, key=lambda p: p.name, reverse=True)
    logger.debug(f"Liste yerinde sıralandı: {[p.name for p in sequence]}")
    return sequence[0]


def first_by_name(sequence: Iterable[Participant]) -> Participant:
    """İsmi en küçük katılımcıyı girdiyi değiştirmeden döndürür."""
    smallest = min(sequence, key=lambda p: p.name, default=None)
    if smallest is None:
        logger.warning("Boş katılımcı dizisinde en küçük isim aranamaz.")
        raise EmptyInputError("first_by_name: katılımcı dizisi boş.")
    return smallest
