"""
Knowledge app

Education, certifications, skills and the unified knowledge entries
(courses, awards, ...) shown on the portfolio.
"""
