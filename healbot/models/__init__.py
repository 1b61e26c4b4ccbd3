from .user import User
from .family_member import FamilyMember
from .medicine import Medicine
from .schedule import Schedule, STATUS_PENDING, STATUS_TAKEN
