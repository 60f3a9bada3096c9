from typing import Optional

from pydantic import BaseModel


class ClientConfig(BaseModel):
    analyticsEnabled: bool = False
    paymentsEnabled: bool = False
    googleAnalyticsId: Optional[str] = None
    mixpanelToken: Optional[str] = None


class SubscribeRequest(BaseModel):
    email: Optional[str] = None


class SubscribeResponse(BaseModel):
    success: bool
    message: str
    premium: bool


class StatsResponse(BaseModel):
    totalPosts: int
    totalSubscribers: int
    monthlyRevenue: int
    activeUsers: int
