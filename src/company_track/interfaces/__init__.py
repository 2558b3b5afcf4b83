"""Outbound ports for company-track.

Abstract contracts the domain and service layer depend on; concrete
implementations live in `company_track.adapters`.
"""
