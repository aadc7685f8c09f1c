"""Step-by-step Vastu analysis workflow."""

from vastuscore.workflow.wizard import STEP_ORDER, VastuWizard, WizardError, WizardStep

__all__ = ["STEP_ORDER", "VastuWizard", "WizardError", "WizardStep"]
