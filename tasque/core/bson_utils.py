# tasque/core/bson_utils.py
# Helpers Pydantic v2 pour ObjectId + base model Mongo, avec JSON Schema propre pour OpenAPI.
from __future__ import annotations

from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler
from pydantic.json_schema import GetJsonSchemaHandler, JsonSchemaValue
from pydantic_core import core_schema


class PyObjectId(ObjectId):
    """ObjectId compatible Pydantic v2 et OpenAPI.

    Description:
        Étend `bson.ObjectId` avec les hooks Pydantic v2 pour:
        - accepter une chaîne hex de 24 caractères **ou** un `ObjectId`
        - sérialiser en chaîne dans les réponses
        - exposer un schéma OpenAPI clair (`type: string`, `format: objectid`)

    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_plain_validator_function(cls._validate),
            python_schema=core_schema.no_info_plain_validator_function(cls._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema_obj: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        # Keep it simple and explicit for Swagger UI
        return {
            "type": "string",
            "format": "objectid",
            "pattern": "^[a-fA-F0-9]{24}$",
            "examples": ["507f1f77bcf86cd799439011"],
        }

    @classmethod
    def _validate(cls, v: Any) -> ObjectId:
        """Valide et convertit en ObjectId.

        Raises:
            ValueError: Si la valeur n’est pas un ObjectId valide.
        """
        oid = to_object_id(v)
        if oid is None:
            raise ValueError(f"Invalid ObjectId: {v!r}")
        return oid


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convertit une valeur en ObjectId, ou None si elle n'en est pas un.

    Description:
        Accepte un `ObjectId` déjà typé ou une chaîne hex de 24 caractères. Les identifiants
        venant des URL ne sont pas fiables : un id mal formé est traité comme « inexistant »
        par les appelants plutôt que de lever une erreur.

    Args:
        value (Any): Valeur à convertir.

    Returns:
        ObjectId | None: Instance validée ou None.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class MongoBaseModel(BaseModel):
    """BaseModel Pydantic pour documents Mongo.

    Description:
        - Champ `_id` exposé via l’alias `id` (type `PyObjectId`)
        - Champs supplémentaires conservés (les documents ne sont pas validés à l'écriture)
    """
    id: Optional[PyObjectId] = Field(default=None, alias="_id")

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )
