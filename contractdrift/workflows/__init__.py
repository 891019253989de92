"""
Workflows package.
"""

from .drift.analyze_contract_wf import analyze_contract_workflow
from .drift.assemble_report_wf import assemble_dashboard
from .drift.intake_documents_wf import intake_documents_workflow

__all__ = [
    "analyze_contract_workflow",
    "assemble_dashboard",
    "intake_documents_workflow",
]
