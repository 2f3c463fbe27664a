# app/services/receipt_service.py
from typing import Optional

from jinja2 import Template

from models.donation import Donation


class ReceiptService:
    """Plain HTML donation receipt. Served inline; no PDF rendering."""

    RECEIPT_TEMPLATE = Template("""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <title>Donation Receipt</title>
        <style>
            body {
                font-family: Arial, sans-serif;
                max-width: 600px;
                margin: 40px auto;
                padding: 20px;
            }
            h1 {
                color: #16a34a;
            }
            .receipt-id {
                font-family: monospace;
                background: #f3f4f6;
                padding: 10px;
            }
        </style>
    </head>
    <body>
        <h1>Donation Receipt</h1>
        <p><strong>Receipt ID:</strong> <span class="receipt-id">{{ receipt_id }}</span></p>
        {% if campaign_name %}
        <p><strong>Campaign:</strong> {{ campaign_name }}</p>
        {% endif %}
        <p><strong>Amount:</strong> ${{ amount }}</p>
        <p><strong>Date:</strong> {{ date }}</p>
        <p>Thank you for your generous donation!</p>
    </body>
    </html>
    """, autoescape=True)

    @classmethod
    def render(cls, donation: Donation, campaign_name: Optional[str] = None) -> str:
        return cls.RECEIPT_TEMPLATE.render(
            receipt_id=donation.receipt_id,
            campaign_name=campaign_name,
            amount=f"{donation.amount:.2f}",
            date=donation.created_at.strftime("%Y-%m-%d"),
        )
