# Utilidades/constantes.py

# Configurações padrão do conversor (entrada, codificação e parâmetros de exibição).
DEFAULTS = {
    "INPUT_TEXT": "Hello",
    "ENCODING": "NRZ",
    "BITS_PER_CHAR": 8,
    "ANIMATION_INTERVAL_MS": 400,
}

# Cores dos níveis de tensão na visualização.
VOLTAGE_COLORS = {
    "HIGH": "#10b981",    # +5V (verde)
    "ZERO": "#f59e0b",    # 0V (âmbar)
    "LOW": "#ef4444",     # -5V (vermelho)
    "TIMING": "#8b5cf6",  # Transições verticais (roxo)
}

VOLTAGE_COLOR_MAP = {
    1: VOLTAGE_COLORS["HIGH"],
    0: VOLTAGE_COLORS["ZERO"],
    -1: VOLTAGE_COLORS["LOW"],
}

VOLTAGE_LABELS = {
    1: "+5V (Alto)",
    0: "0V (Zero)",
    -1: "-5V (Baixo)",
}

# Informações exibidas para cada codificação (chave = valor de EncodingType).
ENCODING_INFO = {
    "NRZ": {
        "name": "Non-Return to Zero (NRZ) Encoding",
        "label": "Non-Return to Zero",
        "description": "NRZ: o bit '1' é representado por nível baixo (-5V) e o bit '0' por nível alto (+5V), "
                       "constantes durante todo o bit, sem retorno a zero entre bits consecutivos.",
    },
    "RZ": {
        "name": "Return to Zero (RZ) Encoding",
        "label": "Return to Zero",
        "description": "RZ: pulso baixo (-5V) na primeira metade representa '1', pulso alto (+5V) representa '0'. "
                       "O sinal sempre retorna a zero na segunda metade.",
    },
    "Manchester": {
        "name": "Manchester Encoding",
        "label": "Manchester",
        "description": "Manchester: transição de alto para baixo representa '1', de baixo para alto representa '0'. "
                       "Todo bit tem uma transição no meio.",
    },
    "AMI": {
        "name": "Binary AMI Encoding",
        "label": "Binary AMI",
        "description": "AMI: '0' é representado por tensão zero. '1' é representado por pulsos que alternam "
                       "entre positivo (+5V) e negativo (-5V).",
    },
    "CMI": {
        "name": "Coded Mark Inversion (CMI) Encoding",
        "label": "CMI",
        "description": "CMI: '0' é 0V na primeira metade e +5V na segunda. '1' alterna entre bit inteiro em 0V "
                       "e bit inteiro em +5V, começando em 0V.",
    },
}
