"""
Identifier Codec

Converts between the opaque string ids exposed by the API and the
ObjectIds MongoDB assigns to stored documents.
"""
from beanie import PydanticObjectId

from vehicle_inventory.core.exceptions import InvalidIdentifier


def to_internal(external_id: str) -> PydanticObjectId:
    """
    Decode an external id string into a storage identifier.
    
    Raises:
        InvalidIdentifier: If the value is not a 24 character hex string
    """
    if not isinstance(external_id, str) or not PydanticObjectId.is_valid(external_id):
        raise InvalidIdentifier(external_id)
    return PydanticObjectId(external_id)


def to_external(internal_id) -> str:
    """Encode a storage identifier as its external string form."""
    return str(internal_id)


def normalize(external_id: str) -> str:
    """Validate an external id and return its canonical string form."""
    return to_external(to_internal(external_id))
