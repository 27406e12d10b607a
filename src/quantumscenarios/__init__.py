"""
Wave-function engine for four textbook one-dimensional quantum scenarios:
infinite well, linear potential between plates, potential barrier and
probability density.
"""
from quantumscenarios.engine import QuantumEngine
