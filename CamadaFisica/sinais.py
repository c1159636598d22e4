# CamadaFisica/sinais.py

import numbers
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class Voltage(IntEnum):
    """Níveis discretos de tensão do sinal (+1 = +5V, 0 = 0V, -1 = -5V)."""
    HIGH = 1
    ZERO = 0
    LOW = -1


class EncodingType(Enum):
    """Códigos de linha suportados. O valor é o nome exibido na interface."""
    NRZ = "NRZ"
    RZ = "RZ"
    MANCHESTER = "Manchester"
    AMI = "AMI"
    CMI = "CMI"

    @classmethod
    def from_name(cls, name):
        """
        Converte o nome de uma codificação (valor exibido ou nome do membro) em EncodingType.
        Nomes desconhecidos geram ValueError; nunca há codificação padrão silenciosa.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            for member in cls:
                if name == member.value or name.upper() == member.name:
                    return member
        raise ValueError(f"Tipo de codificação desconhecido: {name!r}")


class PulseSegment(NamedTuple):
    """Trecho horizontal do pulso: tensão constante entre as frações 'left' e 'right' do bit."""
    left: float
    right: float
    voltage: Voltage


class TransitionMarker(NamedTuple):
    """Transição vertical na fração 'position' do bit, de 'from_voltage' para 'to_voltage'."""
    position: float
    from_voltage: Voltage
    to_voltage: Voltage

    @property
    def low(self):
        return min(self.from_voltage, self.to_voltage)

    @property
    def high(self):
        return max(self.from_voltage, self.to_voltage)


class BinaryUnit(NamedTuple):
    """Um caractere da entrada com seu código e seus bits (MSB primeiro)."""
    character: str
    code_point: int
    bits: tuple

    @property
    def binary(self) -> str:
        return ''.join(str(bit) for bit in self.bits)


@dataclass(frozen=True)
class CmiConvention:
    """
    Convenção usada pelo CMI. Há mais de uma convenção em uso, então
    o nível inicial, o mapeamento dos níveis dos bits '1' e o padrão do bit '0' são configuráveis.

    - initial_level: nível (0 ou 1) usado pelo primeiro bit '1'.
    - one_levels: tensão de cada nível, indexada pelo nível.
    - zero_pattern: tensões da primeira e da segunda metade do bit '0'.
    """
    initial_level: int = 0
    one_levels: tuple = (Voltage.ZERO, Voltage.HIGH)
    zero_pattern: tuple = (Voltage.ZERO, Voltage.HIGH)

    def __post_init__(self):
        if self.initial_level not in (0, 1):
            raise ValueError(f"Nível inicial do CMI deve ser 0 ou 1: {self.initial_level!r}")
        if len(self.one_levels) != 2 or len(self.zero_pattern) != 2:
            raise ValueError("one_levels e zero_pattern devem ter exatamente dois níveis.")


# Convenção da versão mais completa: começa em 0V, bit '0' = 0V -> +5V.
CMI_PADRAO = CmiConvention()
# Convenção da primeira versão: começa em +5V alternando com -5V, bit '0' = +5V -> -5V.
CMI_LEGADO = CmiConvention(
    initial_level=1,
    one_levels=(Voltage.LOW, Voltage.HIGH),
    zero_pattern=(Voltage.HIGH, Voltage.LOW),
)


@dataclass(frozen=True)
class EncodingState:
    """Estado carregado entre bits: polaridade do AMI e nível do CMI."""
    ami_polarity: int = 1
    cmi_level: int = 0

    def __post_init__(self):
        if self.ami_polarity not in (1, -1):
            raise ValueError(f"Polaridade do AMI deve ser +1 ou -1: {self.ami_polarity!r}")
        if self.cmi_level not in (0, 1):
            raise ValueError(f"Nível do CMI deve ser 0 ou 1: {self.cmi_level!r}")

    @classmethod
    def initial(cls, cmi=CMI_PADRAO):
        return cls(ami_polarity=1, cmi_level=cmi.initial_level)


@dataclass(frozen=True)
class BitRender:
    """
    Representação de um bit já codificado: tensões no início e no fim do bit
    e os segmentos (horizontais e transições verticais) em ordem.
    """
    global_index: Optional[int]
    bit_value: int
    start_voltage: Voltage
    end_voltage: Voltage
    segments: tuple

    @property
    def horizontals(self):
        return [seg for seg in self.segments if isinstance(seg, PulseSegment)]

    @property
    def transitions(self):
        return [seg for seg in self.segments if isinstance(seg, TransitionMarker)]

    @property
    def has_mid_transition(self) -> bool:
        return any(0.0 < marker.position < 1.0 for marker in self.transitions)

    def voltage_at(self, fraction: float) -> Voltage:
        """Tensão na fração 'fraction' do bit. Os trechos são fechados à esquerda; 1.0 pertence ao último."""
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"Fração fora do intervalo [0, 1]: {fraction}")
        horizontals = self.horizontals
        for seg in horizontals:
            if seg.left <= fraction < seg.right:
                return seg.voltage
        return horizontals[-1].voltage


def validate_bit(bit):
    """Aceita 0/1 (int, exceto bool) ou '0'/'1' (str) e devolve o inteiro. Qualquer outro valor gera ValueError."""
    if isinstance(bit, str):
        if bit in ('0', '1'):
            return int(bit)
    elif isinstance(bit, numbers.Integral) and not isinstance(bit, bool) and bit in (0, 1):
        return int(bit)
    raise ValueError(f"Valor de bit inválido: {bit!r} (esperado 0 ou 1)")
