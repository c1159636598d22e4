# CamadaFisica/estado_codificacao.py

import logging
from dataclasses import replace

from CamadaFisica.sinais import CMI_PADRAO, EncodingState, EncodingType, validate_bit

logger = logging.getLogger(__name__)


def advance_state(state, bit, encoding):
    """
    Passo único da dobra de estado: devolve o estado em vigor no bit seguinte.
    - AMI: bit '1' inverte a polaridade.
    - CMI: bit '1' alterna o nível (0 -> 1, 1 -> 0).
    Bits '0' e as codificações sem memória (NRZ, RZ, Manchester) não alteram o estado.
    """
    encoding = EncodingType.from_name(encoding)
    if validate_bit(bit) != 1:
        return state
    if encoding is EncodingType.AMI:
        return replace(state, ami_polarity=-state.ami_polarity)
    if encoding is EncodingType.CMI:
        return replace(state, cmi_level=1 - state.cmi_level)
    return state


def iter_bit_states(bits, encoding, start_state):
    """
    Percorre os bits em ordem, devolvendo (bit, estado) com o estado em vigor em cada bit.
    É a dobra usada dentro de um caractere, a partir do estado de entrada do caractere.
    """
    encoding = EncodingType.from_name(encoding)
    state = start_state
    for bit in bits:
        yield bit, state
        state = advance_state(state, bit, encoding)


def compute_character_states(units, encoding, cmi=CMI_PADRAO):
    """
    Calcula o estado de codificação antes do primeiro bit de cada caractere.
    O estado é contínuo entre caracteres: o estado após o caractere i é o estado de entrada do i+1.

    Args:
        units (list[BinaryUnit]): Saída de text_to_binary.
        encoding (EncodingType | str): Codificação selecionada.
        cmi (CmiConvention, opcional): Convenção do CMI (define o nível inicial).

    Returns:
        list[EncodingState]: Um estado por caractere (lista vazia para entrada vazia).
    """
    encoding = EncodingType.from_name(encoding)
    state = EncodingState.initial(cmi)
    states = []
    for unit in units:
        states.append(state)
        for bit in unit.bits:
            state = advance_state(state, bit, encoding)
    logger.debug(f"compute_character_states: {len(states)} estado(s) para {encoding.value}, estado final {state}")
    return states


def state_at_bit(units, encoding, index, cmi=CMI_PADRAO):
    """
    Reconstrói o estado em vigor no bit de índice global 'index'.
    O estado é sequencial, então a reconstrução refaz a dobra desde o início.
    """
    encoding = EncodingType.from_name(encoding)
    if index < 0:
        raise IndexError(f"Índice de bit negativo: {index}")
    state = EncodingState.initial(cmi)
    position = 0
    for unit in units:
        for bit in unit.bits:
            if position == index:
                return state
            state = advance_state(state, bit, encoding)
            position += 1
    raise IndexError(f"Índice de bit {index} fora da sequência de {position} bits")
