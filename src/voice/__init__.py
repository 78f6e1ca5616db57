"""
Módulo de síntesis de voz.
Contiene el feedback auditivo de pulsaciones y resultados.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
