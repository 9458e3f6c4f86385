from .airac_date_calculator import AIRACDateCalculator, get_current_airac_date, parse_airac_date

__all__ = ['AIRACDateCalculator', 'get_current_airac_date', 'parse_airac_date']
