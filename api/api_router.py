# app/api/api_router.py
from fastapi import APIRouter
from api.endpoints import (
    # Authentication
    auth,

    # Campaigns
    campaign,

    # Role dashboards
    admin,
    donor,
    volunteer,
)

api_router = APIRouter()

# ========== 1️⃣ Authentication ==========
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])

# ========== 2️⃣ Campaigns ==========
api_router.include_router(campaign.router, prefix="/campaigns", tags=["Campaigns"])

# ========== 3️⃣ Admin ==========
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])

# ========== 4️⃣ Donor ==========
api_router.include_router(donor.router, prefix="/donor", tags=["Donor"])

# ========== 5️⃣ Volunteer ==========
api_router.include_router(volunteer.router, prefix="/volunteer", tags=["Volunteer"])
