"""Optional add-ons billed on top of the rental price"""

from carshare_billing.domain.models import Options

DEDUCTIBLE_REDUCTION_PER_DAY = 400  # cents


def calculate_options(nb_days: int, deductible_option: bool) -> Options:
    """Price the add-ons the driver opted in for"""
    deductible_reduction = DEDUCTIBLE_REDUCTION_PER_DAY * nb_days if deductible_option else 0
    return Options(deductible_reduction=deductible_reduction)
