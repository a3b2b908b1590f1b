import csv
import io
import logging

from utils.dates import normalize_date
from utils.money import parse_expense_amount

REQUIRED_COLUMNS = {"Date", "Amount"}


def parse_expense_csv(contents: str):
    """Read expense rows from CSV text.

    Nothing is stored; good rows come back as ``{"date", "amount"}``
    records and bad rows are reported by row number.
    """
    reader = csv.DictReader(io.StringIO(contents, newline=""))
    if not reader.fieldnames:
        return {"success": False, "error": "CSV is missing headers"}

    missing = sorted(REQUIRED_COLUMNS - set(reader.fieldnames))
    if missing:
        return {"success": False, "error": f"CSV is missing required columns: {', '.join(missing)}"}

    expenses = []
    failed = []
    total = 0

    for idx, row in enumerate(reader, start=1):
        total += 1
        try:
            raw_date = (row.get("Date") or "").strip()
            if not raw_date:
                raise ValueError("Missing required date")

            expense = {
                "date": normalize_date(raw_date),
                "amount": parse_expense_amount(row.get("Amount")),
            }
            label = (row.get("Label") or row.get("Description") or "").strip()
            if label:
                expense["label"] = label
        except ValueError as e:
            failed.append({"row": idx, "error": str(e)})
            logging.warning(f"Row {idx} failed: {e}")
            continue

        expenses.append(expense)
        logging.info(f"Row {idx} parsed ({expense['date']}, {expense['amount']:.2f})")

    return {
        "success": True,
        "expenses": expenses,
        "failed": failed,
        "total": total,
    }
