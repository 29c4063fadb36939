# services/dashboard_service.py
"""
Dashboard figures for one landlord account over the current calendar month.
"""
from datetime import date
from typing import Optional, Tuple

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from models import Expense, Payment, Property, Tenant, Unit, UnitStatus


def month_bounds(today: date) -> Tuple[date, date]:
     """First day of today's month and first day of the next month."""
     start = today.replace(day=1)
     if start.month == 12:
          end = start.replace(year=start.year + 1, month=1)
     else:
          end = start.replace(month=start.month + 1)
     return start, end


def compute_dashboard_stats(db: Session, owner_id: str, today: Optional[date] = None) -> dict:
     """
     monthlyIncome   = sum of payments received this month
     monthlyExpenses = sum of live expenses dated this month
     totalArrears    = rent of live tenants with no payment this month
     occupancyRate   = occupied / total live units, in percent
     """
     start, end = month_bounds(today or date.today())

     income = (
          db.query(func.coalesce(func.sum(Payment.amount_paid), 0))
          .join(Property, Payment.property_id == Property.id)
          .filter(
               Property.owner_id == owner_id,
               Payment.payment_date >= start,
               Payment.payment_date < end,
          )
          .scalar()
     )

     expenses = (
          db.query(func.coalesce(func.sum(Expense.amount), 0))
          .join(Property, Expense.property_id == Property.id)
          .filter(
               Property.owner_id == owner_id,
               Expense.deleted_at.is_(None),
               Expense.date >= start,
               Expense.date < end,
          )
          .scalar()
     )

     total_units, occupied_units = (
          db.query(
               func.count(Unit.id),
               func.coalesce(func.sum(case((Unit.status == UnitStatus.OCCUPIED, 1), else_=0)), 0),
          )
          .join(Property, Unit.property_id == Property.id)
          .filter(
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
               Unit.deleted_at.is_(None),
          )
          .one()
     )

     paid_this_month = select(Payment.tenant_id).where(
          Payment.payment_date >= start,
          Payment.payment_date < end,
     )
     arrears = (
          db.query(func.coalesce(func.sum(Tenant.rent_amount), 0))
          .join(Property, Tenant.property_id == Property.id)
          .filter(
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
               Tenant.deleted_at.is_(None),
               Tenant.id.not_in(paid_this_month),
          )
          .scalar()
     )

     income = float(income or 0)
     expenses = float(expenses or 0)
     total_units = int(total_units or 0)
     occupied_units = int(occupied_units or 0)

     return {
          "monthly_income": income,
          "monthly_expenses": expenses,
          "net_profit": income - expenses,
          "total_arrears": float(arrears or 0),
          "occupancy_rate": (occupied_units / total_units) * 100 if total_units > 0 else 0.0,
          "total_units": total_units,
          "occupied_units": occupied_units,
     }
