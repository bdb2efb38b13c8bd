from supabase import Client
from skillswap.modules.credits.schemas import CreditTransactionResponse, LedgerEntry, WalletStats, WalletResponse
from skillswap.core.time_utils import utc_now, parse_timestamp
from typing import List, Optional
from datetime import datetime
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

INSUFFICIENT_CREDITS_DETAIL = "Insufficient credits. Please earn more credits or reduce the offer."


def compute_wallet_stats(transactions: List[CreditTransactionResponse], now: Optional[datetime] = None) -> WalletStats:
    """Lifetime earned/spent totals and the net change in the current calendar month"""
    now = now or utc_now()
    total_earned = sum(t.amount for t in transactions if t.type == "earned")
    total_spent = sum(t.amount for t in transactions if t.type == "spent")
    this_month = 0
    for t in transactions:
        if t.created_at is None:
            continue
        created = parse_timestamp(t.created_at)
        if created.year == now.year and created.month == now.month:
            this_month += t.amount if t.type == "earned" else -t.amount
    return WalletStats(total_earned=total_earned, total_spent=total_spent, this_month=this_month)


class CreditService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_balance(self, user_id: str) -> int:
        result = self.supabase.table("users")\
            .select("credits")\
            .eq("id", user_id)\
            .limit(1)\
            .execute()
        if not result.data:
            raise HTTPException(status_code=404, detail="User not found")
        return result.data[0]["credits"]

    def apply_transaction(
        self,
        user_id: str,
        amount: int,
        tx_type: str,
        description: str,
        meetup_id: Optional[str] = None
    ) -> LedgerEntry:
        """Move a user's balance and record the ledger row. Returns the row with the new balance."""
        if amount <= 0:
            raise HTTPException(status_code=400, detail="Credit amount must be positive")
        if tx_type not in ("earned", "spent"):
            raise HTTPException(status_code=400, detail=f"Unknown transaction type: {tx_type}")

        try:
            current = self.get_balance(user_id)
            new_balance = current + amount if tx_type == "earned" else current - amount
            if new_balance < 0:
                raise HTTPException(status_code=400, detail=INSUFFICIENT_CREDITS_DETAIL)

            # Compare-and-set: only succeeds if nobody moved the balance since we read it
            updated = self.supabase.table("users")\
                .update({"credits": new_balance, "updated_at": utc_now().isoformat()})\
                .eq("id", user_id)\
                .eq("credits", current)\
                .execute()
            if not updated.data:
                raise HTTPException(status_code=409, detail="Credit balance changed, please retry")
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating credits for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        insert_data = {
            "user_id": user_id,
            "amount": amount,
            "type": tx_type,
            "description": description,
        }
        if meetup_id:
            insert_data["meetup_id"] = meetup_id
        try:
            result = self.supabase.table("credit_transactions").insert(insert_data).execute()
            if not result.data:
                raise RuntimeError("empty insert result")
        except Exception as e:
            logger.error(f"Error recording credit transaction for {user_id}, reverting balance: {e}")
            self._revert_balance(user_id, expected=new_balance, restore=current)
            raise HTTPException(status_code=500, detail="Failed to record credit transaction")

        logger.info(f"Credits {tx_type} user={user_id} amount={amount} balance={current}->{new_balance}")
        return LedgerEntry(transaction=CreditTransactionResponse(**result.data[0]), balance=new_balance)

    def _revert_balance(self, user_id: str, expected: int, restore: int):
        try:
            reverted = self.supabase.table("users")\
                .update({"credits": restore})\
                .eq("id", user_id)\
                .eq("credits", expected)\
                .execute()
            if not reverted.data:
                logger.error(f"Could not revert balance for {user_id}: balance moved to something other than {expected}")
        except Exception as e:
            logger.error(f"Could not revert balance for {user_id}: {e}")

    def earn(self, user_id: str, amount: int, description: str, meetup_id: Optional[str] = None) -> LedgerEntry:
        return self.apply_transaction(user_id, amount, "earned", description, meetup_id)

    def spend(self, user_id: str, amount: int, description: str, meetup_id: Optional[str] = None) -> LedgerEntry:
        return self.apply_transaction(user_id, amount, "spent", description, meetup_id)

    def list_transactions(self, user_id: str, limit: Optional[int] = None) -> List[CreditTransactionResponse]:
        """Ledger rows for a user, newest first"""
        try:
            query = self.supabase.table("credit_transactions")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)
            if limit:
                query = query.limit(limit)
            result = query.execute()
            return [CreditTransactionResponse(**t) for t in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_wallet(self, user_id: str, balance: int) -> WalletResponse:
        transactions = self.list_transactions(user_id)
        return WalletResponse(
            balance=balance,
            transactions=transactions,
            stats=compute_wallet_stats(transactions),
        )
