"""Domain constants for period reporting."""

ROLLING_WEEK_DAYS = 7
ROLLING_MONTH_DAYS = 30
ROLLING_MONTH_BUCKET_DAYS = 7
ROLLING_YEAR_MONTHS = 12
DAYS_PER_WEEK = 7

ROLLING_WEEK_LABEL = "Últimos 7 dias"
ROLLING_MONTH_LABEL = "Últimos 30 dias"
ROLLING_YEAR_LABEL = "Últimos 12 meses"
WEEK_BUCKET_LABEL = "Semana"

MONTH_ABBREVIATIONS = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)

FIXED_EXPENSE_LABEL = "Fixo/Semanal"
EMERGENCY_EXPENSE_LABEL = "Emergencial"

DIRECT_SALE_LABEL = "Venda direta"
DELIVERY_PARTNER_SALE_LABEL = "Repasse iFood"

DEFAULT_RECENT_LIMIT = 5


__all__ = [
    "ROLLING_WEEK_DAYS",
    "ROLLING_MONTH_DAYS",
    "ROLLING_MONTH_BUCKET_DAYS",
    "ROLLING_YEAR_MONTHS",
    "DAYS_PER_WEEK",
    "ROLLING_WEEK_LABEL",
    "ROLLING_MONTH_LABEL",
    "ROLLING_YEAR_LABEL",
    "WEEK_BUCKET_LABEL",
    "MONTH_ABBREVIATIONS",
    "FIXED_EXPENSE_LABEL",
    "EMERGENCY_EXPENSE_LABEL",
    "DIRECT_SALE_LABEL",
    "DELIVERY_PARTNER_SALE_LABEL",
    "DEFAULT_RECENT_LIMIT",
]
