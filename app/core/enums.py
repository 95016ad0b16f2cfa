from enum import Enum


class SurchargeRule(str, Enum):
    EVENING = "evening"
    NIGHT = "night"
    SATURDAY = "saturday"
    SUNDAY_OR_HOLIDAY = "sunday_or_holiday"

    def __str__(self):
        return self.value


class BreakdownField(str, Enum):
    BASE_AMOUNT = "base_amount"
    ADJUSTED_BASE = "adjusted_base"
    URGENT_FEE = "urgent_fee"
    TRAVEL_FEE = "travel_fee"
    SUBTOTAL = "subtotal"
    PLATFORM_FEE = "platform_fee"
    TOTAL_BEFORE_TAX = "total_before_tax"
    TAX = "tax"
    TOTAL_WITH_TAX = "total_with_tax"
    PROCESSOR_FEE = "processor_fee"
    FINAL_TOTAL = "final_total"

    def __str__(self):
        return self.value
