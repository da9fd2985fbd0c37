# id, label, min, max. (0, 0) = no range yet, edit once the server publishes one
DEFAULT_JOB_TYPES = (
    ("ROADSIDE", "Roadside", 300, 1000),
    ("REFUEL", "Refuel", 200, 250),
    ("FLIP", "Flip", 100, 500),

    ("COSMETIC", "Cosmetic", 0, 0),
    ("BODYWORK", "Body Work", 0, 0),
    ("PERFORMANCE", "Performance", 0, 0),
)

FINISH_CHOICE = 0
OVERRIDE_YES = "y"
BLANK_FIELD = "-"
LABEL_WIDTH = 12
TIME_FORMAT = "%Y-%m-%d %H:%M"

INVOICE_TITLE = "===== INVOICE (copy this into Google Docs) ====="
INVOICE_RULE = "-----------------------------------------------"
INVOICE_END = "==============================================="
