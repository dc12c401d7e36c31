# app/prompts/feature/trackr_agent/function_tool_calling_schema.py
# Function declarations exposed to the chat model. The client app executes the calls.

from typing import Dict, Any, List
from app.models.tool_models import ToolCatalog

TRANSACTION_TYPES = ["expense", "income"]
CARD_TYPES = ["debit", "credit"]
CARD_STATUSES = ["active", "archived"]

FUNCTION_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "getTransactions",
        "description": "Fetches the user's transactions from the database, optionally filtered.",
        "parameters": {
            "category": {"type": "string", "description": "Only return transactions in this category."},
            "type": {"type": "string", "enum": TRANSACTION_TYPES, "description": "Only return expenses or only income."},
            "startDate": {"type": "string", "description": "Inclusive lower bound, ISO date (YYYY-MM-DD)."},
            "endDate": {"type": "string", "description": "Inclusive upper bound, ISO date (YYYY-MM-DD)."},
            "limit": {"type": "integer", "description": "Maximum number of transactions to return."},
        },
    },
    {
        "name": "getUserDetails",
        "description": "Fetches the user's details.",
    },
    {
        "name": "getBalance",
        "description": "Fetches the user's balance without currency.",
    },
    {
        "name": "getCards",
        "description": "Fetches the user's cards.",
        "parameters": {
            "status": {"type": "string", "enum": CARD_STATUSES, "description": "Only return cards with this status."},
        },
    },
    {
        "name": "createTransaction",
        "description": "Creates a new transaction for the user.",
        "parameters": {
            "title": {"type": "string", "description": "Short title of the transaction.", "required": True},
            "amount": {"type": "number", "description": "Transaction amount, always positive.", "required": True},
            "type": {"type": "string", "enum": TRANSACTION_TYPES, "required": True},
            "category": {"type": "string", "description": "Spending or income category.", "required": True},
            "date": {"type": "string", "description": "ISO date (YYYY-MM-DD); defaults to today."},
            "notes": {"type": "string", "description": "Free-form notes."},
            "cardId": {"type": "string", "description": "Card the transaction was made with."},
        },
    },
    {
        "name": "updateTransaction",
        "description": "Updates fields of an existing transaction. Only the given fields change.",
        "parameters": {
            "id": {"type": "string", "description": "Identifier of the transaction to update.", "required": True},
            "title": {"type": "string"},
            "amount": {"type": "number"},
            "type": {"type": "string", "enum": TRANSACTION_TYPES},
            "category": {"type": "string"},
            "date": {"type": "string", "description": "ISO date (YYYY-MM-DD)."},
            "notes": {"type": "string"},
        },
    },
    {
        "name": "archiveCard",
        "description": "Archives one of the user's cards so it can no longer be used.",
        "parameters": {
            "cardId": {"type": "string", "description": "Identifier of the card to archive.", "required": True},
        },
    },
    {
        "name": "activateCard",
        "description": "Re-activates a previously archived card.",
        "parameters": {
            "cardId": {"type": "string", "description": "Identifier of the card to activate.", "required": True},
        },
    },
    {
        "name": "createCard",
        "description": "Creates a new card for the user.",
        "parameters": {
            "name": {"type": "string", "description": "Display name of the card.", "required": True},
            "type": {"type": "string", "enum": CARD_TYPES, "required": True},
            "lastFourDigits": {"type": "string", "description": "Last four digits printed on the card."},
            "color": {"type": "string", "description": "Display color, e.g. a hex code."},
        },
    },
]

def build_tool_catalog() -> ToolCatalog:
    return ToolCatalog.from_dicts(FUNCTION_TOOLS)
