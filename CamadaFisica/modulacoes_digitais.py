import logging

import numpy as np

from CamadaFisica.estado_codificacao import iter_bit_states
from CamadaFisica.sinais import (
    CMI_PADRAO, BitRender, EncodingState, EncodingType, PulseSegment, TransitionMarker, Voltage, validate_bit,
)

logger = logging.getLogger(__name__)

# Fração do bit onde ocorrem as transições de meio de bit.
MID_BIT = 0.5


def _full_bit(voltage):
    return (PulseSegment(0.0, 1.0, Voltage(voltage)),)


def _half_split(first, second):
    """Bit dividido em duas metades, com transição vertical no meio."""
    first, second = Voltage(first), Voltage(second)
    return (
        PulseSegment(0.0, MID_BIT, first),
        PulseSegment(MID_BIT, 1.0, second),
        TransitionMarker(MID_BIT, first, second),
    )


class DigitalEncoder:
    """Implementa esquemas de codificação de linha (modulação em banda base).
    Converte cada bit, junto com o estado de codificação em vigor, nos trechos de tensão do pulso.
    """

    def __init__(self, cmi=CMI_PADRAO):
        """
        Parâmetros:
        - cmi: convenção do CMI (nível inicial, níveis dos bits '1' e padrão do bit '0').
        """
        self.cmi = cmi
        # Despacho fechado por tipo de codificação; tipos sem tratador geram ValueError.
        self._handlers = {
            EncodingType.NRZ: self.nrz,
            EncodingType.RZ: self.rz,
            EncodingType.MANCHESTER: self.manchester,
            EncodingType.AMI: self.ami,
            EncodingType.CMI: self.cmi_bit,
        }

    def render_bit(self, bit_value, encoding, state, global_index=None):
        """
        Resolve as tensões de um único bit.

        Parâmetros:
        - bit_value: 0/1 (ou '0'/'1').
        - encoding: EncodingType ou nome da codificação.
        - state: EncodingState em vigor neste bit.
        - global_index: posição do bit na sequência completa (preenchida pelo chamador).

        Retorna um BitRender com tensão inicial, tensão final e segmentos do pulso.
        """
        bit = validate_bit(bit_value)
        encoding = EncodingType.from_name(encoding)
        handler = self._handlers.get(encoding)
        if handler is None:
            raise ValueError(f"Tipo de codificação sem tratador: {encoding!r}")

        segments = handler(bit, state)
        horizontals = [seg for seg in segments if isinstance(seg, PulseSegment)]
        return BitRender(
            global_index=global_index,
            bit_value=bit,
            start_voltage=horizontals[0].voltage,
            end_voltage=horizontals[-1].voltage,
            segments=segments,
        )

    def nrz(self, bit, state=None):
        """
        Implementa codificação NRZ (Non-Return to Zero):
        - Bit '1': nível baixo constante (-1)
        - Bit '0': nível alto constante (+1)

        O nível permanece constante durante todo o bit. Não depende do estado.
        """
        return _full_bit(Voltage.LOW if bit == 1 else Voltage.HIGH)

    def rz(self, bit, state=None):
        """
        Implementa codificação RZ (Return to Zero):
        - Bit '1': primeira metade em -1
        - Bit '0': primeira metade em +1
        Em ambos os casos a segunda metade retorna a zero.
        """
        return _half_split(Voltage.LOW if bit == 1 else Voltage.HIGH, Voltage.ZERO)

    def manchester(self, bit, state=None):
        """
        Implementa codificação Manchester:
        - Bit '1': primeira metade positiva (+1), segunda metade negativa (-1)
        - Bit '0': primeira metade negativa (-1), segunda metade positiva (+1)

        O valor do bit está no sentido da transição no meio do bit.
        """
        if bit == 1:
            return _half_split(Voltage.HIGH, Voltage.LOW)
        return _half_split(Voltage.LOW, Voltage.HIGH)

    def ami(self, bit, state):
        """
        Implementa codificação AMI (Alternate Mark Inversion):
        - Bit '0': nível zero
        - Bit '1': nível igual à polaridade corrente do estado (+1 ou -1)

        A alternância da polaridade é feita pela dobra de estado, não aqui.
        """
        if bit == 1:
            return _full_bit(state.ami_polarity)
        return _full_bit(Voltage.ZERO)

    def cmi_bit(self, bit, state):
        """
        Implementa codificação CMI (Coded Mark Inversion):
        - Bit '1': bit inteiro no nível corrente do estado, mapeado pela convenção
        - Bit '0': padrão fixo de duas metades (por padrão 0V e depois +5V)
        """
        if bit == 1:
            return _full_bit(self.cmi.one_levels[state.cmi_level])
        return _half_split(*self.cmi.zero_pattern)

    def render_bits(self, bits, encoding, state=None, start_index=0):
        """
        Codifica uma sequência de bits a partir de 'state' (estado inicial se omitido),
        avançando o estado bit a bit. Os índices globais começam em 'start_index'.
        """
        encoding = EncodingType.from_name(encoding)
        if state is None:
            state = EncodingState.initial(self.cmi)
        return [
            self.render_bit(bit, encoding, bit_state, start_index + offset)
            for offset, (bit, bit_state) in enumerate(iter_bit_states(bits, encoding, state))
        ]

    def sample_renders(self, renders, samples_per_bit=10):
        """
        Amostra os bits já codificados, gerando o sinal discreto (numpy).
        A amostra k de cada bit é tomada na fração k / samples_per_bit.
        """
        if samples_per_bit < 1:
            raise ValueError(f"samples_per_bit deve ser >= 1: {samples_per_bit}")
        offsets = np.arange(samples_per_bit) / samples_per_bit
        signal = [float(render.voltage_at(t)) for render in renders for t in offsets]
        return np.array(signal, dtype=float)

    def encode(self, bits, encoding_type, samples_per_bit=10, state=None):
        """
        Interface para aplicar uma codificação de linha a uma sequência de bits e obter o sinal amostrado.

        Parâmetros:
        - bits: sequência binária a ser codificada.
        - encoding_type: tipo de codificação (NRZ, RZ, Manchester, AMI, CMI).
        - samples_per_bit: quantidade de amostras por bit (define resolução temporal do sinal).
        - state: estado de codificação inicial (opcional).
        """
        renders = self.render_bits(bits, encoding_type, state)
        signal = self.sample_renders(renders, samples_per_bit)
        logger.debug(f"encode: {len(renders)} bit(s) em {EncodingType.from_name(encoding_type).value}, {len(signal)} amostras")
        return signal

    @staticmethod
    def time_axis(num_bits, samples_per_bit=10, bit_rate=1000):
        """Eixo de tempo (s) correspondente ao sinal amostrado."""
        return np.arange(num_bits * samples_per_bit) / (samples_per_bit * bit_rate)


_default_encoder = DigitalEncoder()


def render_bit(bit_value, encoding, state, global_index=None):
    """Atalho para DigitalEncoder.render_bit com a convenção CMI padrão."""
    return _default_encoder.render_bit(bit_value, encoding, state, global_index)
