"""French display strings for strategy labels, reasoning and notifications.

Templates use ``str.format`` placeholders.  Each rule profile has its own
table so the edge deployment keeps its shorter wording.
"""

DASHBOARD_MESSAGES: dict[str, str] = {
    # Labels
    "trend.label": "Analyse de Tendance (EMA/SMA)",
    "reversal.label": "Stratégie de Reversal (RSI/Bollinger)",
    "technical.label": "Indicateurs Techniques (MACD/Stochastic)",
    "sentiment.label": "Analyse de Sentiment (NLP)",
    "volatility.label": "Analyse de Volatilité (ATR)",
    # Trend
    "trend.up": "haussière",
    "trend.down": "baissière",
    "trend.reasoning": "Tendance {trend} détectée avec momentum de {momentum:.3f}%",
    # Reversal (wording kept as shipped: "survente" on the overbought branch)
    "reversal.overbought": "Zone de survente détectée - reversal probable",
    "reversal.oversold": "Zone de surachat détectée - reversal probable",
    "reversal.neutral": "Marché en équilibre - attendre signal",
    # Technical
    "technical.up": "crossover haussier",
    "technical.down": "crossover baissier",
    "technical.reasoning": "MACD {crossover} confirmé par Stochastic",
    # Sentiment
    "sentiment.positive": "positif",
    "sentiment.negative": "négatif",
    "sentiment.neutral": "neutre",
    "sentiment.reasoning": "Sentiment {mood} détecté sur {pair}",
    # Volatility
    "volatility.high": "élevée",
    "volatility.normal": "normale",
    "volatility.high_advice": "prudence recommandée",
    "volatility.normal_advice": "opportunité de position",
    "volatility.reasoning": "Volatilité {level} - {advice}",
    # Consensus
    "overall.reasoning": (
        "{buy} signaux d'achat, {sell} signaux de vente "
        "sur {total} stratégies analysées"
    ),
}

EDGE_MESSAGES: dict[str, str] = {
    **DASHBOARD_MESSAGES,
    "trend.label": "Analyse de Tendance",
    "reversal.label": "Stratégie de Reversal",
    "technical.label": "Indicateurs Techniques",
    "sentiment.label": "Analyse de Sentiment",
    "volatility.label": "Analyse de Volatilité",
    "trend.reasoning": "Tendance {trend}",
    "reversal.overbought": "Potentiel renversement détecté",
    "reversal.oversold": "Potentiel renversement détecté",
    "reversal.neutral": "Pas de signal de renversement clair",
    "volatility.reasoning": "Volatilité {level}",
    "overall.reasoning": "{buy} signaux d'achat, {sell} signaux de vente",
}

# Dashboard notifications
NOTIFY_PAIR_SUCCESS = "Analyse {pair} terminée avec succès!"
NOTIFY_PAIR_ERROR = "Erreur lors de l'analyse de {pair}"
NOTIFY_REFRESH_LOADING = "Actualisation de toutes les analyses..."
NOTIFY_REFRESH_SUCCESS = "Toutes les analyses mises à jour!"
NOTIFY_REFRESH_ERROR = "Erreur lors de l'actualisation"
