# truckorder/api/orchestrator/__init__.py
from .orchestrator import OrderDecision, OrderOrchestrator, OrderRoute

__all__ = [
    "OrderDecision",
    "OrderOrchestrator",
    "OrderRoute",
]
