from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration and methods for golf records."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """
        Apply a correction to one field.

        Returns the first validation message and keeps the previous value when
        the new one is rejected, else None. Model-level validators run after
        the value is stored, so the old value is put back by hand.
        """
        previous = getattr(self, field_name)
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            self.__dict__[field_name] = previous
            return e.errors()[0]['msg']
