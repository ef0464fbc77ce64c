"""
services - Business-logic layer sitting between API/UI and DB.
"""

from services.auth_service import AuthService, AuthError                # noqa: F401
from services.records_service import RecordsService                    # noqa: F401
from services.filter_service import RecordFilter, apply_filters, paginate  # noqa: F401
from services.kpi_service import Kpis, compute_kpis                    # noqa: F401
