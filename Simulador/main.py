# Simulador/main.py

import argparse
import logging
import sys
import os

# Ajusta o PYTHONPATH para que os módulos das camadas possam ser importados
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.append(project_root)

from CamadaFisica.sinais import CMI_LEGADO, CMI_PADRAO, EncodingType
from Simulador.conversor import ConversorPulsos
from Utilidades.constantes import DEFAULTS, ENCODING_INFO

logger = logging.getLogger(__name__)

VOLTAGE_SYMBOLS = {1: "+5V", 0: " 0V", -1: "-5V"}


def format_bit_table(resultado):
    """
    Monta a tabela textual de bits: índice, caractere, bit, tensões e conector para o próximo bit.
    """
    lines = [f"{'#':>4}  {'car':<5}{'bit':<4}{'início':<8}{'fim':<6}{'meio':<6}conector"]
    positions = []
    for unit in resultado.units:
        positions.extend([unit.character] * len(unit.bits))
    connectors = list(resultado.connectors) + [None]
    for render, char, connector in zip(resultado.bits, positions, connectors):
        connector_text = (f"{VOLTAGE_SYMBOLS[connector.from_voltage]} → {VOLTAGE_SYMBOLS[connector.to_voltage]}"
                          if connector is not None else "-")
        lines.append(
            f"{render.global_index:>4}  {char!r:<5}{render.bit_value:<4}"
            f"{VOLTAGE_SYMBOLS[render.start_voltage]:<8}{VOLTAGE_SYMBOLS[render.end_voltage]:<6}"
            f"{'sim' if render.has_mid_transition else 'não':<6}{connector_text}"
        )
    return "\n".join(lines)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Converte texto em códigos de pulso (NRZ, RZ, Manchester, AMI, CMI).")
    parser.add_argument("texto", nargs="?", default=DEFAULTS["INPUT_TEXT"], help="Texto a codificar.")
    parser.add_argument("-e", "--encoding", default=DEFAULTS["ENCODING"],
                        help=f"Código de pulso: {', '.join(e.value for e in EncodingType)}.")
    parser.add_argument("--cmi-legado", action="store_true",
                        help="Usa a convenção CMI legada (+5V/-5V, bit '0' alto -> baixo).")
    parser.add_argument("--truncar", action="store_true",
                        help="Limita caracteres acima de 255 aos 8 bits menos significativos.")
    parser.add_argument("--plot", action="store_true", help="Exibe o gráfico do trem de pulsos.")
    parser.add_argument("--exportar", metavar="ARQUIVO", help="Exporta o gráfico para PNG ou SVG.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Ativa logs de depuração.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    conversor = ConversorPulsos(cmi=CMI_LEGADO if args.cmi_legado else CMI_PADRAO, truncate=args.truncar)
    try:
        resultado = conversor.converter(args.texto, args.encoding)
    except ValueError as e:
        logger.error(f"Erro nos parâmetros: {e}")
        return 2

    print(f"\n--- {ENCODING_INFO[resultado.encoding.value]['name']} ---")
    print(resultado.summary)
    for number, step in enumerate(resultado.steps(), start=1):
        print(f"  Etapa {number}: {step}")
    print()
    print(format_bit_table(resultado))

    if args.plot or args.exportar:
        # Matplotlib só é carregado quando há gráfico.
        import matplotlib.pyplot as plt
        from InterfaceGUI.grafico_pulsos import export_figure, plot_pulse_train

        fig = plot_pulse_train(resultado)
        if args.exportar:
            try:
                export_figure(fig, args.exportar)
            except ValueError as e:
                logger.error(f"Erro na exportação: {e}")
                return 2
        if args.plot:
            plt.show()
        plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
