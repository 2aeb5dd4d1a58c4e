"""
Business CRUD operations.

Dependencies: sqlalchemy, bizbot.boundary.db.models.business_model
System role: Business persistence operations
"""

from bizbot.boundary.db.CRUD.base_crud import BaseCRUD
from bizbot.boundary.db.models.business_model import BusinessModel


class BusinessCRUD(BaseCRUD[BusinessModel]):
    """CRUD operations for BusinessModel."""

    def __init__(self) -> None:
        super().__init__(BusinessModel)


business_crud = BusinessCRUD()
