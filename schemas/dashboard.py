# schemas/dashboard.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardStats(BaseModel):
     """Current-month figures for one landlord account (camelCase on the wire)."""
     monthly_income: float
     monthly_expenses: float
     net_profit: float
     total_arrears: float
     occupancy_rate: float
     total_units: int
     occupied_units: int

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "monthlyIncome": 1350000,
                    "monthlyExpenses": 200000,
                    "netProfit": 1150000,
                    "totalArrears": 450000,
                    "occupancyRate": 75.0,
                    "totalUnits": 4,
                    "occupiedUnits": 3,
               }
          },
     )
