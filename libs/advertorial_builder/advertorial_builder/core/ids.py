"""
Identifiants de blocs.

Format : blk_<timestamp ms en base 36>_<compteur>
Le compteur est partagé par tous les générateurs du process : un générateur
injecté et le générateur par défaut ne renvoient jamais la même valeur, même
dans la même milliseconde. Un compteur propre (counter=) n'est destiné qu'aux
tests déterministes.
"""
import itertools
import threading
import time
from typing import Callable, Iterator, Optional

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Compteur monotone du process, commun à toutes les instances
_PROCESS_COUNTER = itertools.count(1)
_PROCESS_LOCK    = threading.Lock()


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError("to_base36 : entier positif attendu")
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_DIGITS[r])
    return "".join(reversed(out))


class BlockIdGenerator:
    """Générateur d'ids injectable (horloge, compteur du process par défaut)."""

    def __init__(
        self,
        prefix: str = "blk",
        clock: Callable[[], float] = time.time,
        counter: Optional[Iterator[int]] = None,
    ):
        self.prefix = prefix
        self._clock = clock
        if counter is None:
            self._counter, self._lock = _PROCESS_COUNTER, _PROCESS_LOCK
        else:
            self._counter, self._lock = counter, threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            n = next(self._counter)
        stamp = to_base36(int(self._clock() * 1000))
        return f"{self.prefix}_{stamp}_{n}"

    __call__ = next_id


# Générateur par défaut du process ; les appels de génération acceptent ids=
_DEFAULT = BlockIdGenerator()


def next_id() -> str:
    return _DEFAULT.next_id()
