# Simulador/conversor.py

import logging
from dataclasses import dataclass, field

from CamadaFisica.continuidade import connectors_for
from CamadaFisica.estado_codificacao import compute_character_states, iter_bit_states, state_at_bit
from CamadaFisica.modulacoes_digitais import DigitalEncoder
from CamadaFisica.sinais import CMI_PADRAO, EncodingType
from Utilidades import utils
from Utilidades.constantes import ENCODING_INFO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultadoConversao:
    """Saída completa de uma conversão: caracteres, estados por caractere, bits codificados e conectores."""
    text: str
    encoding: EncodingType
    units: list = field(default_factory=list)
    states: list = field(default_factory=list)
    bits: list = field(default_factory=list)
    connectors: list = field(default_factory=list)

    @property
    def total_bits(self) -> int:
        return len(self.bits)

    @property
    def summary(self) -> str:
        chars = len(self.units)
        label = f"{chars} caractere{'s' if chars != 1 else ''}"
        widths = {len(unit.bits) for unit in self.units}
        if widths <= {8}:
            return f"{label} × 8 bits = {self.total_bits} bits"
        # Caracteres acima de 255 têm mais de 8 bits: mostra a largura de cada um.
        detail = ' + '.join(str(len(unit.bits)) for unit in self.units)
        return f"{label} ({detail} bits) = {self.total_bits} bits"

    def steps(self) -> list[str]:
        """As quatro etapas da conversão, no formato exibido pela interface."""
        return [
            f'"{self.text}" → [{", ".join(repr(u.character) for u in self.units)}]',
            ', '.join(f"{u.character!r} → {u.code_point}" for u in self.units),
            ', '.join(f"{u.code_point} → {u.binary}" for u in self.units),
            f"Aplicando a codificação {ENCODING_INFO[self.encoding.value]['name'].split(' ')[0]} à sequência binária",
        ]


class ConversorPulsos:
    """
    Orquestra o fluxo completo: texto -> bits -> estados -> pulsos por bit -> conectores.
    Cada chamada parte de um estado novo; nada é guardado entre conversões.
    """

    def __init__(self, cmi=CMI_PADRAO, truncate=False):
        """
        Args:
            cmi (CmiConvention, opcional): Convenção usada pelo CMI.
            truncate (bool, opcional): Limita caracteres acima de 255 a 8 bits.
        """
        self.cmi = cmi
        self.truncate = truncate
        self.encoder = DigitalEncoder(cmi)

    def converter(self, texto: str, encoding) -> ResultadoConversao:
        """
        Converte o texto na codificação escolhida.

        Args:
            texto (str): Texto de entrada (vazio é permitido e gera resultado vazio).
            encoding (EncodingType | str): Codificação de linha.

        Returns:
            ResultadoConversao: Estruturas prontas para a camada de apresentação.
        """
        encoding = EncodingType.from_name(encoding)
        units = utils.text_to_binary(texto, truncate=self.truncate)
        states = compute_character_states(units, encoding, self.cmi)

        renders = []
        for unit, start_state in zip(units, states):
            renders.extend(self.encoder.render_bits(unit.bits, encoding, start_state, start_index=len(renders)))
        connectors = connectors_for(renders)

        logger.info(f"Conversão '{utils.format_log(texto, 32)}' em {encoding.value}: {len(units)} caractere(s), {len(renders)} bits")
        logger.debug(f"Bits: {utils.format_log(''.join(u.binary for u in units))}")
        return ResultadoConversao(texto, encoding, units, states, renders, connectors)

    def render_bit_at(self, units, encoding, index, state=None):
        """
        Codifica apenas o bit de índice global 'index'.
        Se o estado nesse bit já é conhecido ele é usado diretamente; senão a dobra é refeita desde o início.
        """
        encoding = EncodingType.from_name(encoding)
        bits = utils.flatten_bits(units)
        if not 0 <= index < len(bits):
            raise IndexError(f"Índice de bit {index} fora da sequência de {len(bits)} bits")
        if state is None:
            state = state_at_bit(units, encoding, index, self.cmi)
        return self.encoder.render_bit(bits[index], encoding, state, global_index=index)

    def bit_states(self, units, encoding):
        """Estado em vigor em cada bit da sequência completa (útil para inspeção passo a passo)."""
        encoding = EncodingType.from_name(encoding)
        states = compute_character_states(units, encoding, self.cmi)
        return [
            bit_state
            for unit, start_state in zip(units, states)
            for _, bit_state in iter_bit_states(unit.bits, encoding, start_state)
        ]
