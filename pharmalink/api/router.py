from fastapi import APIRouter

from pharmalink.domains.chat.api import routes as chat_routes
from pharmalink.domains.notifications.api import routes as notification_routes
from pharmalink.domains.pharmacies.api import routes as pharmacy_routes
from pharmalink.domains.requests.api import routes as request_routes
from pharmalink.domains.users.api import routes as user_routes

api_router = APIRouter()

# API routes (all have the API_PREFIX from settings)
api_router.include_router(user_routes.auth_router)

# Customer
api_router.include_router(request_routes.customer_router)
api_router.include_router(pharmacy_routes.customer_router)

# Partner
api_router.include_router(request_routes.partner_router)
api_router.include_router(user_routes.partner_router)

# Agent
api_router.include_router(pharmacy_routes.agent_router)

# Shared
api_router.include_router(chat_routes.router)
api_router.include_router(notification_routes.router)
