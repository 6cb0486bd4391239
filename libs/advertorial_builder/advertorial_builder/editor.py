"""
Opérations d'édition d'une page (liste ordonnée de blocs).

Fonctions pures : la liste d'entrée n'est jamais modifiée, une nouvelle liste
est renvoyée. Les éléments peuvent être des blocs typés ou des dicts wire.
Index hors bornes → IndexError.
"""
import copy
from typing import Any, Callable, List, Optional, TypeVar

from .core.ids import next_id

T = TypeVar("T")


def _check_index(blocks: list, index: int, *, allow_end: bool = False) -> None:
    upper = len(blocks) if allow_end else len(blocks) - 1
    if not 0 <= index <= upper:
        raise IndexError(f"Index de bloc hors bornes : {index} (page de {len(blocks)} blocs)")


def _with_id(block: T, new_id: str) -> T:
    if isinstance(block, dict):
        return {**block, "id": new_id}
    return block.model_copy(update={"id": new_id})


def insert_block(blocks: List[T], block: T, index: Optional[int] = None) -> List[T]:
    """Insère à l'index donné (fin de page par défaut)."""
    out = list(blocks)
    if index is None:
        out.append(block)
        return out
    _check_index(blocks, index, allow_end=True)
    out.insert(index, block)
    return out


def move_block(blocks: List[T], src: int, dst: int) -> List[T]:
    """Déplace le bloc d'index src vers dst ; les autres gardent leur ordre relatif."""
    _check_index(blocks, src)
    _check_index(blocks, dst)
    out = list(blocks)
    out.insert(dst, out.pop(src))
    return out


def move_up(blocks: List[T], index: int) -> List[T]:
    """Flèche ↑ de l'éditeur — no-op sur le premier bloc."""
    _check_index(blocks, index)
    return move_block(blocks, index, index - 1) if index > 0 else list(blocks)


def move_down(blocks: List[T], index: int) -> List[T]:
    _check_index(blocks, index)
    return move_block(blocks, index, index + 1) if index < len(blocks) - 1 else list(blocks)


def swap_blocks(blocks: List[T], i: int, j: int) -> List[T]:
    _check_index(blocks, i)
    _check_index(blocks, j)
    out = list(blocks)
    out[i], out[j] = out[j], out[i]
    return out


def duplicate_block(blocks: List[T], index: int, ids: Optional[Callable[[], str]] = None) -> List[T]:
    """Copie profonde du bloc avec un id neuf, insérée juste après l'original."""
    _check_index(blocks, index)
    clone = _with_id(copy.deepcopy(blocks[index]), (ids or next_id)())
    return insert_block(blocks, clone, index + 1)


def delete_block(blocks: List[T], index: int) -> List[T]:
    _check_index(blocks, index)
    return blocks[:index] + blocks[index + 1:]


def update_block(blocks: List[T], index: int, changes: dict) -> List[T]:
    """
    Applique des modifications de champs au bloc (clés wire camelCase ou
    snake_case pour un bloc typé). `type` et `id` ne sont jamais modifiés.
    """
    _check_index(blocks, index)
    changes = {k: v for k, v in changes.items() if k not in ("type", "id")}
    current: Any = blocks[index]

    if isinstance(current, dict):
        updated = {**current, **changes}
    else:
        fields = type(current).model_fields
        data = current.model_dump(by_alias=True)
        data.update({(fields[k].alias if k in fields else k): v for k, v in changes.items()})
        updated = type(current).model_validate(data)

    out = list(blocks)
    out[index] = updated
    return out
