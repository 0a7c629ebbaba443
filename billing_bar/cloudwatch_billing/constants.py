"""Fixed CloudWatch billing query parameters and menu layout values."""

BILLING_NAMESPACE = "AWS/Billing"
ESTIMATED_CHARGES_METRIC = "EstimatedCharges"
SUM_STATISTIC = "Sum"

# Billing metrics are only published in us-east-1
DEFAULT_REGION = "us-east-1"
DEFAULT_CURRENCY = "USD"
DEFAULT_SEARCH_PATH = ("/usr/local/bin",)

CURRENCY_DIMENSION = "Currency"
SERVICE_NAME_DIMENSION = "ServiceName"
TOTAL_LABEL = "Total"

SERVICE_LABEL_WIDTH = 18
BILLS_CONSOLE_URL = "https://console.aws.amazon.com/billing/home?#/bills"
