"""Request-binding dependencies.

``validated(Model)`` parses the body into ``Model`` (shape checks by pydantic),
then runs the business rules bound to ``Model``. An invalid result raises
RequestValidationFailed before the endpoint body executes.
"""

from typing import TypeVar

from fastapi import Depends
from pydantic import BaseModel

from socialnet.validators import ValidationFacade, get_validation_facade

ModelT = TypeVar("ModelT", bound=BaseModel)


def validated(model: type[ModelT]):
    def dependency(
        body: model,  # type: ignore[valid-type]
        facade: ValidationFacade = Depends(get_validation_facade),
    ) -> ModelT:
        return facade.validate_or_raise(body)

    dependency.__name__ = f"validated_{model.__name__}"
    return dependency
