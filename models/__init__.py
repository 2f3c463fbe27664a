from models.base import Base

from models.user import User, UserRole
from models.campaign import Campaign, CampaignStatus
from models.donation import Donation
from models.event import Event
from models.volunteer_assignment import VolunteerAssignment
from models.fund_usage import FundUsage
