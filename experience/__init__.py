"""
Experience app

Companies, experiences with their date ranges, and the aggregated
multi-period timeline shown on the portfolio.
"""
