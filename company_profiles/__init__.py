"""
Company Profiles - company pages and a company directory for a job board.
"""
