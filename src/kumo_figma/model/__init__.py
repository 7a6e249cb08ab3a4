from kumo_figma.model.diagnostic import Diagnostic, Severity

__all__ = ["Diagnostic", "Severity"]
