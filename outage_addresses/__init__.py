"""Outage Addresses - списки адресов из графиков плановых отключений."""
