from enum import Enum


class IncomeType(str, Enum):
    active = "active"
    passive = "passive"


class IncomeFrequency(str, Enum):
    monthly = "monthly"
    bi_weekly = "bi-weekly"
    weekly = "weekly"
    annually = "annually"
    one_time = "one-time"
