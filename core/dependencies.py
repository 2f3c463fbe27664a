from fastapi import Request

from services.statistics_service import StatisticsService
from services.storage import CharityStorage


def get_storage(request: Request) -> CharityStorage:
    return request.app.state.storage


def get_statistics(request: Request) -> StatisticsService:
    return request.app.state.statistics
