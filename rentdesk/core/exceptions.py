"""
Domain errors raised by the service layer and mapped to HTTP responses in main.py
"""


class NotFoundError(Exception):
    """A referenced row does not exist."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
