# This project was developed with assistance from AI tools.
"""CSV export of the offers currently on screen."""

import csv
import io
from collections.abc import Iterable

from ..schemas.advisory import LoanOffer

CSV_FILENAME = "LoanPath_CSV_Report.csv"
CSV_TITLE = "Bank Offers Export"
CSV_HEADER = ("Name", "Rate", "Fee")


def offers_to_csv(offers: Iterable[LoanOffer]) -> str:
    """Render (lender, rate, fee) rows under a title line and header."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([CSV_TITLE])
    writer.writerow(CSV_HEADER)
    for offer in offers:
        writer.writerow([offer.bank_name, f"{offer.interest_rate:g}", offer.processing_fee])
    return buffer.getvalue()
