# InterfaceGUI/grafico_pulsos.py

import logging
import os

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from Utilidades.constantes import ENCODING_INFO, VOLTAGE_COLOR_MAP, VOLTAGE_COLORS, VOLTAGE_LABELS

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('.png', '.svg')


def draw_pulse_train(ax, resultado, connect_bits=True, connector_color=None, show_midbit_markers=False,
                     active_bit=None):
    """
    Desenha o trem de pulsos de uma conversão em um eixo Matplotlib.
    Cada bit ocupa uma unidade no eixo X; trechos horizontais são coloridos pelo nível de tensão
    e transições verticais usam a cor de temporização.

    Args:
        ax (matplotlib.axes.Axes): Eixo de destino (é limpo antes do desenho).
        resultado (ResultadoConversao): Saída de ConversorPulsos.converter.
        connect_bits (bool, opcional): Desenha os conectores entre bits com tensões diferentes.
        connector_color (str, opcional): Cor dos conectores (padrão: cor de temporização).
        show_midbit_markers (bool, opcional): Marca com linha tracejada os bits com transição no meio.
        active_bit (int, opcional): Índice do bit destacado (animação passo a passo).

    Returns:
        matplotlib.axes.Axes: O próprio eixo.
    """
    ax.clear()
    timing_color = VOLTAGE_COLORS["TIMING"]

    for render in resultado.bits:
        x0 = render.global_index
        for seg in render.horizontals:
            ax.hlines(int(seg.voltage), x0 + seg.left, x0 + seg.right,
                      colors=VOLTAGE_COLOR_MAP[int(seg.voltage)], linewidth=2.5)
        for marker in render.transitions:
            ax.vlines(x0 + marker.position, int(marker.low), int(marker.high), colors=timing_color, linewidth=1.5)
        if show_midbit_markers and render.has_mid_transition:
            ax.axvline(x0 + 0.5, color='gray', linestyle=':', linewidth=0.8)

    if connect_bits:
        for render, connector in zip(resultado.bits, resultado.connectors):
            if connector is not None:
                ax.vlines(render.global_index + connector.position, int(connector.low), int(connector.high),
                          colors=connector_color or timing_color, linewidth=1.5)

    # Separadores de caractere e rótulos de bit.
    boundary = 0
    for unit in resultado.units:
        ax.axvline(boundary, color='black', linewidth=0.6, alpha=0.5)
        ax.text(boundary + len(unit.bits) / 2, 1.45, f"'{unit.character}'", ha='center', fontsize=9)
        boundary += len(unit.bits)

    if active_bit is not None and 0 <= active_bit < resultado.total_bits:
        ax.axvspan(active_bit, active_bit + 1, color='gold', alpha=0.25)

    ax.set_xticks([render.global_index + 0.5 for render in resultado.bits])
    ax.set_xticklabels([str(render.bit_value) for render in resultado.bits], fontsize=8)
    ax.set_yticks([1, 0, -1])
    ax.set_yticklabels([VOLTAGE_LABELS[1], VOLTAGE_LABELS[0], VOLTAGE_LABELS[-1]])
    ax.set_xlim(0, max(resultado.total_bits, 1))
    ax.set_ylim(-1.5, 1.7)
    ax.grid(True, axis='y', linestyle='--', linewidth=0.5, alpha=0.8)
    ax.set_title(f"{ENCODING_INFO[resultado.encoding.value]['name']} | {resultado.summary}", fontsize=12)
    ax.legend(handles=_legend_handles(), loc='lower right', fontsize=8, ncol=4)
    return ax


def _legend_handles():
    handles = [Line2D([0], [0], color=VOLTAGE_COLOR_MAP[level], linewidth=2.5, label=VOLTAGE_LABELS[level])
               for level in (1, 0, -1)]
    handles.append(Line2D([0], [0], color=VOLTAGE_COLORS["TIMING"], linewidth=1.5, label="Temporização"))
    return handles


def plot_pulse_train(resultado, figsize=None, **options):
    """
    Cria uma figura com o trem de pulsos da conversão.
    A largura cresce com a quantidade de bits para manter cada bit legível.

    Returns:
        matplotlib.figure.Figure
    """
    if figsize is None:
        figsize = (max(8, min(0.5 * resultado.total_bits, 40)), 4)
    fig, ax = plt.subplots(figsize=figsize)
    draw_pulse_train(ax, resultado, **options)
    fig.tight_layout()
    return fig


def export_figure(fig, path):
    """
    Exporta a figura como imagem PNG ou SVG (formato definido pela extensão do arquivo).
    """
    extension = os.path.splitext(str(path))[1].lower()
    if extension not in EXPORT_FORMATS:
        raise ValueError(f"Formato de exportação não suportado: '{extension}' (use {', '.join(EXPORT_FORMATS)})")
    fig.savefig(path, format=extension[1:], bbox_inches='tight')
    logger.info(f"Figura exportada para {path}")
    return path
