from fastapi import APIRouter, Depends, Query
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.credits.schemas import CreditTransactionResponse, WalletResponse
from skillswap.modules.credits.service import CreditService
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/credits", tags=["credits"])


def get_credit_service(supabase: Client = Depends(get_supabase)) -> CreditService:
    return CreditService(supabase)


@router.get("", response_model=WalletResponse)
async def get_wallet(
    profile: Dict = Depends(get_current_profile),
    service: CreditService = Depends(get_credit_service)
):
    """Balance, full transaction history and monthly stats"""
    return service.get_wallet(profile["id"], profile["credits"])


@router.get("/transactions", response_model=List[CreditTransactionResponse])
async def list_transactions(
    limit: int = Query(5, ge=1, le=100),
    profile: Dict = Depends(get_current_profile),
    service: CreditService = Depends(get_credit_service)
):
    return service.list_transactions(profile["id"], limit=limit)
