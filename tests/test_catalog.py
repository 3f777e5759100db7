from salonsync.constants.catalog import SERVICES_MEN, SERVICES_NAILS, SERVICES_WOMEN
from salonsync.domain.settings import AppSettings
from salonsync.scheduling.catalog import appointment_duration, find_service, resolve_services

from conftest import appointment, at


def ids(services):
    return [s.id for s in services]


def test_hair_catalog_follows_specialization():
    women = resolve_services(AppSettings(profession="hair", specialization="women"))
    men = resolve_services(AppSettings(profession="hair", specialization="men"))
    unisex = resolve_services(AppSettings(profession="hair", specialization="unisex"))

    assert ids(women) == [s["id"] for s in SERVICES_WOMEN]
    assert ids(men) == [s["id"] for s in SERVICES_MEN]
    assert ids(unisex) == [s["id"] for s in SERVICES_MEN + SERVICES_WOMEN]


def test_nails_ignore_specialization():
    services = resolve_services(AppSettings(profession="nails", specialization="men"))

    assert ids(services) == [s["id"] for s in SERVICES_NAILS]


def test_duration_override_is_applied():
    settings = AppSettings().with_override("w_cut", 75)

    cut = find_service(resolve_services(settings), "w_cut")

    assert cut.duration == 75


def test_zero_override_keeps_catalog_duration():
    settings = AppSettings().with_override("w_cut", 0)

    cut = find_service(resolve_services(settings), "w_cut")

    assert cut.duration == 60


def test_override_does_not_change_the_catalog():
    resolve_services(AppSettings().with_override("w_cut", 15))

    assert SERVICES_WOMEN[0]["duration"] == 60


def test_appointment_duration_falls_back_to_thirty_minutes():
    services = resolve_services(AppSettings())

    assert appointment_duration(appointment(at(9), service_id="w_color"), services) == 120
    assert appointment_duration(appointment(at(9)), services) == 30
    assert appointment_duration(appointment(at(9), service_id="gone"), services) == 30


def test_service_formatting():
    cut = find_service(resolve_services(AppSettings()), "w_cut")

    assert cut.short_name == "Női hajvágás"
    assert cut.price_formatted == "8 500 Ft"
    assert cut.duration_formatted == "60 min"
