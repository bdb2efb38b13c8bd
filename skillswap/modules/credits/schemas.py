from pydantic import BaseModel
from typing import Optional, List, Literal
from datetime import datetime


class CreditTransactionResponse(BaseModel):
    id: str
    user_id: str
    amount: int
    type: Literal["earned", "spent"]
    description: str
    meetup_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LedgerEntry(BaseModel):
    """A recorded transaction and the balance it left behind"""
    transaction: CreditTransactionResponse
    balance: int


class WalletStats(BaseModel):
    total_earned: int = 0
    total_spent: int = 0
    this_month: int = 0


class WalletResponse(BaseModel):
    balance: int
    transactions: List[CreditTransactionResponse]
    stats: WalletStats
