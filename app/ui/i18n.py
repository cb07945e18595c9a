# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Freight Trip Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
UI Texts (Polish / English)

Templates use str.format placeholders: {currency}, {rate}, {consumption}, {name}.
"""

LANGUAGES = ("pl", "en")

DICTIONARY = {
    "pl": {
        "header_title": "Kalkulator Transportowy",
        "header_subtitle": "Rentowność kursu po kosztach i podatku",
        "currency_settings_title": "Ustawienia waluty",
        "euro_mode_toggle": "Tryb EUR",
        "refresh_rate_title": "Odśwież kurs EUR/PLN",
        "current_rate_label": "Aktualny kurs:",
        "trip_date_label": "Data kursu",
        "distance_label": "Dystans (km)",
        "calc_mode_toggle": "Stawka za km",
        "freight_amount_label": "Kwota frachtu ({currency})",
        "rate_per_km_label": "Stawka za km ({currency}/km)",
        "custom_costs_title": "Koszty i podatek",
        "custom_costs_hint": "Koszty podawane są zawsze w PLN.",
        "tax_residency_label": "Rezydencja podatkowa",
        "fuel_price_label": "Cena paliwa (PLN/l)",
        "fuel_consumption_label": "Spalanie (l/100 km)",
        "toll_cost_label": "Opłaty drogowe (PLN/km)",
        "service_cost_label": "Serwis i eksploatacja (PLN/km)",
        "results_title_pln": "Wyniki (PLN)",
        "results_title_eur": "Wyniki (EUR)",
        "total_revenue_title": "Przychód",
        "distance_display_label": "Dystans",
        "costs_section_title": "Koszty operacyjne",
        "total_op_cost_title": "Koszty razem",
        "earnings_before_tax_title": "Zysk przed opodatkowaniem",
        "tax_cost_title": "Podatek ({rate})",
        "total_net_profit_title": "Zysk netto",
        "net_profit_per_km_title": "Zysk netto na km",
        "suggested_price_title": "Cena minimalna (próg rentowności)",
        "cost_fuel": "Paliwo ({rate}, {consumption} l/100 km)",
        "cost_toll": "Opłaty drogowe ({rate})",
        "cost_service": "Serwis ({rate})",
        "rate_fetch_error": "Nie udało się pobrać kursu. Używany jest poprzedni kurs: {rate}",
        "rate_fetched": "Kurs zaktualizowany: 1 EUR = {rate} PLN",
        "language_button": "English",
        "save_trip_button": "Zapisz kurs",
        "trip_saved": "Kurs zapisany",
        "history_title": "Historia kursów",
        "load_button": "Wczytaj",
        "delete_button": "Usuń",
        "no_history": "Brak zapisanych kursów",
        "filter_date_from": "Od",
        "filter_date_to": "Do",
        "period_summary_title": "Podsumowanie okresu",
        "all_history_summary_title": "Podsumowanie całej historii",
        "period_total_profit": "Zysk netto razem",
        "period_total_distance": "Dystans razem",
        "clear_filters": "Wyczyść filtry",
        "clear_history": "Wyczyść historię",
        "no_filter_results": "Brak kursów w wybranym okresie",
        "login_title": "Zaloguj się, aby kontynuować",
        "username_label": "Nazwa użytkownika",
        "password_label": "Hasło",
        "login_button": "Zaloguj",
        "login_error": "Nieprawidłowa nazwa użytkownika lub hasło",
        "welcome_user": "Witaj, {name}",
        "logout_button": "🚪 Wyloguj",
        "admin_panel_button": "Panel administratora",
        "back_to_calculator": "Powrót do kalkulatora",
        "manage_users_title": "Zarządzanie użytkownikami",
        "add_user_title": "Dodaj użytkownika",
        "role_label": "Rola",
        "create_user_button": "Utwórz użytkownika",
        "user_created_success": "Użytkownik utworzony",
        "user_exists": "Użytkownik już istnieje",
        "cannot_delete_admin": "Nie można usunąć administratora",
        "fill_all_fields": "Wypełnij wszystkie pola",
        "validation_distance": "Podaj dystans, aby zapisać kurs",
        "validation_revenue": "Podaj kwotę frachtu lub stawkę za km, aby zapisać kurs",
        "validation_other": "Nie można zapisać kursu: {message}",
    },
    "en": {
        "header_title": "Freight Trip Calculator",
        "header_subtitle": "Trip profitability after costs and tax",
        "currency_settings_title": "Currency settings",
        "euro_mode_toggle": "EUR mode",
        "refresh_rate_title": "Refresh EUR/PLN rate",
        "current_rate_label": "Current rate:",
        "trip_date_label": "Trip date",
        "distance_label": "Distance (km)",
        "calc_mode_toggle": "Rate per km",
        "freight_amount_label": "Freight amount ({currency})",
        "rate_per_km_label": "Rate per km ({currency}/km)",
        "custom_costs_title": "Costs and tax",
        "custom_costs_hint": "Costs are always entered in PLN.",
        "tax_residency_label": "Tax residency",
        "fuel_price_label": "Fuel price (PLN/l)",
        "fuel_consumption_label": "Fuel consumption (l/100 km)",
        "toll_cost_label": "Tolls (PLN/km)",
        "service_cost_label": "Service and wear (PLN/km)",
        "results_title_pln": "Results (PLN)",
        "results_title_eur": "Results (EUR)",
        "total_revenue_title": "Revenue",
        "distance_display_label": "Distance",
        "costs_section_title": "Operational costs",
        "total_op_cost_title": "Total costs",
        "earnings_before_tax_title": "Earnings before tax",
        "tax_cost_title": "Tax ({rate})",
        "total_net_profit_title": "Net profit",
        "net_profit_per_km_title": "Net profit per km",
        "suggested_price_title": "Minimum price (breakeven)",
        "cost_fuel": "Fuel ({rate}, {consumption} l/100 km)",
        "cost_toll": "Tolls ({rate})",
        "cost_service": "Service ({rate})",
        "rate_fetch_error": "Could not fetch the exchange rate. Using the previous rate: {rate}",
        "rate_fetched": "Rate updated: 1 EUR = {rate} PLN",
        "language_button": "Polski",
        "save_trip_button": "Save trip",
        "trip_saved": "Trip saved",
        "history_title": "Trip history",
        "load_button": "Load",
        "delete_button": "Delete",
        "no_history": "No saved trips",
        "filter_date_from": "From",
        "filter_date_to": "To",
        "period_summary_title": "Period summary",
        "all_history_summary_title": "All-time summary",
        "period_total_profit": "Total net profit",
        "period_total_distance": "Total distance",
        "clear_filters": "Clear filters",
        "clear_history": "Clear history",
        "no_filter_results": "No trips in the selected period",
        "login_title": "Log in to continue",
        "username_label": "Username",
        "password_label": "Password",
        "login_button": "Log in",
        "login_error": "Invalid username or password",
        "welcome_user": "Welcome, {name}",
        "logout_button": "🚪 Logout",
        "admin_panel_button": "Admin panel",
        "back_to_calculator": "Back to calculator",
        "manage_users_title": "Manage users",
        "add_user_title": "Add user",
        "role_label": "Role",
        "create_user_button": "Create user",
        "user_created_success": "User created",
        "user_exists": "User already exists",
        "cannot_delete_admin": "The admin account cannot be deleted",
        "fill_all_fields": "Fill in all fields",
        "validation_distance": "Enter a distance to save the trip",
        "validation_revenue": "Enter a freight amount or a rate per km to save the trip",
        "validation_other": "Cannot save the trip: {message}",
    },
}


def get_texts(language: str) -> dict:
    """Texts for a language, Polish when unknown."""
    return DICTIONARY.get(language, DICTIONARY["pl"])
