"""SentCut: sentiment-driven cut points for videos."""
