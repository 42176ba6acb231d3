from .amortization import (
	fair_market_rent,
	monthly_buyout,
	fixed_monthly_payment,
	rent_schedule_total,
	aggregate_yearly,
)
from .comparator import (
	ComparisonInput,
	ComparisonResult,
	MonthlyRecord,
	YearlyRecord,
	compare,
)
from .errors import ComparisonError, InvalidPrincipal, InvalidRate, InvalidTerm
from .utils import usd, grow, round_half_up

__all__ = [
	"fair_market_rent",
	"monthly_buyout",
	"fixed_monthly_payment",
	"rent_schedule_total",
	"aggregate_yearly",
	"ComparisonInput",
	"ComparisonResult",
	"MonthlyRecord",
	"YearlyRecord",
	"compare",
	"ComparisonError",
	"InvalidPrincipal",
	"InvalidRate",
	"InvalidTerm",
	"usd",
	"grow",
	"round_half_up",
]
