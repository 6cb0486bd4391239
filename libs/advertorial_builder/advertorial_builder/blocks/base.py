"""
Blocs de base pour advertorial_builder.
Attributs Python en snake_case, clés JSON (wire/persistance) en camelCase.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.ids import next_id


class BlockModel(BaseModel):
    """Modèle commun aux blocs et à leurs sous-enregistrements."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseBlock(BlockModel):
    """Bloc de base (classe parente des 23 variantes)."""
    type: str
    id: str = Field(default_factory=next_id)

    def to_wire(self) -> dict:
        """Forme JSON du bloc : clés camelCase, champs optionnels absents omis."""
        return self.model_dump(by_alias=True, exclude_none=True)
