# CamadaFisica/continuidade.py

import logging

from CamadaFisica.sinais import TransitionMarker, Voltage

logger = logging.getLogger(__name__)


def connector_between(prev_end_voltage, next_start_voltage):
    """
    Decide se há transição vertical na fronteira entre dois bits.
    Retorna None quando as tensões coincidem (o sinal já é contínuo); caso contrário,
    uma TransitionMarker na posição 1.0 do bit anterior cobrindo [min, max] das duas tensões.
    """
    prev_end_voltage = Voltage(prev_end_voltage)
    next_start_voltage = Voltage(next_start_voltage)
    if prev_end_voltage == next_start_voltage:
        return None
    return TransitionMarker(1.0, prev_end_voltage, next_start_voltage)


def connectors_for(renders):
    """
    Aplica connector_between a cada par de bits adjacentes, inclusive entre caracteres.
    Retorna uma lista com len(renders) - 1 entradas (None onde não há conector).
    """
    connectors = [
        connector_between(current.end_voltage, following.start_voltage)
        for current, following in zip(renders, renders[1:])
    ]
    logger.debug(f"connectors_for: {sum(c is not None for c in connectors)} conector(es) em {len(renders)} bit(s)")
    return connectors
