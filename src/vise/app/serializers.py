from typing import Any

from ..core.entities.client import Client
from ..core.entities.entity import Entity
from ..core.entities.purchase import PurchaseRecord


def client_to_json(client: Entity[Client]) -> dict[str, Any]:
    return {
        "clientId": client.id,
        "name": client.props.name,
        "country": client.props.country,
        "monthlyIncome": client.props.monthly_income,
        "viseClub": client.props.vise_club,
        "cardType": client.props.card_type,
        "createdAt": client.created_at.isoformat(),
    }


def purchase_to_json(purchase: PurchaseRecord) -> dict[str, Any]:
    return {
        "clientId": purchase.client_id,
        "originalAmount": purchase.original_amount,
        "discountPercent": purchase.discount_percent,
        "discountApplied": float(purchase.discount_applied),
        "finalAmount": float(purchase.final_amount),
        "benefit": purchase.benefit,
        "currency": purchase.currency,
        "purchaseDate": purchase.purchase_date,
        "purchaseCountry": purchase.purchase_country,
        "processedAt": purchase.processed_at.isoformat(),
    }
