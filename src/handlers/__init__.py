"""
Lambda handlers package for AWS Lambda functions.
"""
from .pcos import handler as pcos_handler
from .logs import handler as logs_handler
from .recommendations import handler as recommendations_handler
from .phase import handler as phase_handler
from .groceries import handler as groceries_handler
from .fridge import handler as fridge_handler
from .meal_plan import handler as meal_plan_handler
from .grocery_lists import handler as grocery_lists_handler

__all__ = [
    "pcos_handler",
    "logs_handler",
    "recommendations_handler",
    "phase_handler",
    "groceries_handler",
    "fridge_handler",
    "meal_plan_handler",
    "grocery_lists_handler"
]
