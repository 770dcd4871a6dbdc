"""Resultado único de ejecutar un descriptor.

Por qué un tipo `Outcome` en vez de dos callbacks:
- Un valor de retorno solo se puede entregar una vez; no hay estado mutable
  de "ya llamé a success/failure".
- `Success | Failure` obliga al caller a tratar ambos casos.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ValidationError

from core.domain.errors import EmptyResponseError, HttpStatusError
from core.domain.models import ApiError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Success:
    """Respuesta recibida; `content` son los bytes crudos (posiblemente vacíos)."""

    content: bytes = b""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return True

    def json(self) -> Any:
        """Decodifica el body como JSON (`None` si está vacío)."""

        if not self.content:
            return None
        return json.loads(self.content)

    def parse(self, model: type[ModelT]) -> ModelT:
        """Valida el body contra un modelo Pydantic del dominio."""

        if not self.content:
            raise EmptyResponseError(f"cannot parse {model.__name__} from an empty response body")
        return model.model_validate_json(self.content)


@dataclass(frozen=True)
class Failure:
    """La petición no se completó; `cause` es el error subyacente."""

    cause: Exception

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> int | None:
        if isinstance(self.cause, HttpStatusError):
            return self.cause.status_code
        return None

    @property
    def content(self) -> bytes:
        if isinstance(self.cause, HttpStatusError):
            return self.cause.content
        return b""

    def api_error(self) -> ApiError | None:
        """Decodifica el body de error de Sonos (`errorCode`/`reason`) si existe."""

        if not self.content:
            return None
        try:
            return ApiError.model_validate_json(self.content)
        except ValidationError:
            return None


Outcome = Union[Success, Failure]
