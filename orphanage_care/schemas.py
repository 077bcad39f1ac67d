from typing import Annotated, List
from pydantic import BaseModel, ConfigDict, StringConstraints

# Numbers sent for string fields are stored as strings ("portNumber": 5001 -> "5001")
COERCE = ConfigDict(coerce_numbers_to_str=True)

# blank strings count as missing, like an unset field
Required = Annotated[str, StringConstraints(min_length=1)]

# --------------------------
# Stored records
# --------------------------
class Record(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

class Donor(Record):
    name: Required
    email: Required
    password: Required

class OrphanageIdentity(Record):
    headName: Required
    email: Required
    password: Required

class OrphanageProfile(Record):
    orphanageName: Required
    principalName: Required
    city: Required
    state: Required
    address: Required
    numChildren: int
    needs: Required
    latitude: Required
    longitude: Required
    portNumber: Required

# listing view: no city/state/coordinates
SUMMARY_FIELDS: List[str] = [
    "orphanageName",
    "principalName",
    "address",
    "numChildren",
    "needs",
    "portNumber",
]

# --------------------------
# Responses
# --------------------------
class MessageOut(BaseModel):
    message: str

class PortCheckOut(BaseModel):
    isUnique: bool
