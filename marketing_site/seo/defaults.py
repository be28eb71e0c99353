"""
Static SEO defaults

Locale-specific title/description bundles used when the CMS has no SEO
component for a page (or is unreachable). Looked up by locale-free path;
unknown paths fall back to the site-wide bundle.
"""

from __future__ import annotations

from dataclasses import dataclass

from marketing_site.i18n.locale import DEFAULT_LOCALE, normalize_locale
from marketing_site.i18n.paths import strip_locale


@dataclass(frozen=True)
class PageDefaults:
    title: str
    description: str


SITE_DEFAULTS: dict[str, PageDefaults] = {
    "en": PageDefaults(
        title="SmartHoster | Airbnb & Short-Term Rental Management in Portugal",
        description=(
            "Local, full-service property management for Alojamento Local (AL) in Portugal. "
            "Cleaning, linens, check-ins, compliance & guest support, all included."
        ),
    ),
    "pt": PageDefaults(
        title="SmartHoster | Gestão de Alojamento Local em Portugal",
        description=(
            "Gestão profissional de Alojamento Local (AL) em Portugal. Inclui limpezas, "
            "lavandaria, check-ins, apoio ao hóspede e conformidade legal."
        ),
    ),
    "fr": PageDefaults(
        title="SmartHoster | Gestion de locations de courte durée au Portugal",
        description=(
            "Gestion professionnelle des locations Airbnb et AL au Portugal. Nettoyage, linge, "
            "accueil des invités et conformité légale inclus."
        ),
    ),
}

PAGE_DEFAULTS: dict[str, dict[str, PageDefaults]] = {
    "/": SITE_DEFAULTS,
    "/pricing": {
        "en": PageDefaults(
            title="Pricing | SmartHoster",
            description="Transparent pricing for short-term rental management in Portugal. No hidden fees.",
        ),
        "pt": PageDefaults(
            title="Preços | SmartHoster",
            description="Preços transparentes para gestão de Alojamento Local em Portugal. Sem custos escondidos.",
        ),
        "fr": PageDefaults(
            title="Tarifs | SmartHoster",
            description="Des tarifs transparents pour la gestion de locations courte durée au Portugal.",
        ),
    },
    "/about": {
        "en": PageDefaults(
            title="About Us | SmartHoster",
            description="Meet the local team behind SmartHoster's property management in Portugal.",
        ),
        "pt": PageDefaults(
            title="Sobre Nós | SmartHoster",
            description="Conheça a equipa local por detrás da gestão de propriedades SmartHoster em Portugal.",
        ),
        "fr": PageDefaults(
            title="À propos | SmartHoster",
            description="Découvrez l'équipe locale derrière la gestion immobilière SmartHoster au Portugal.",
        ),
    },
    "/full-service-management": {
        "en": PageDefaults(
            title="Full-Service Property Management | SmartHoster",
            description=(
                "End-to-end short-term rental management in Portugal: listings, pricing, guests, "
                "cleaning and licensing handled for you."
            ),
        ),
        "pt": PageDefaults(
            title="Gestão Completa de Propriedades | SmartHoster",
            description=(
                "Gestão integral de Alojamento Local em Portugal: anúncios, preços, hóspedes, "
                "limpezas e licenciamento tratados por nós."
            ),
        ),
        "fr": PageDefaults(
            title="Gestion Complète de Propriétés | SmartHoster",
            description=(
                "Gestion de A à Z de votre location courte durée au Portugal : annonces, tarifs, "
                "voyageurs, ménage et licences."
            ),
        ),
    },
    "/enhanced-direct-bookings": {
        "en": PageDefaults(
            title="Enhanced Direct Bookings | SmartHoster",
            description=(
                "Commission-free direct bookings for your rental: an SEO-optimized booking page, "
                "Google Business sync, integrated payments and a live calendar."
            ),
        ),
        "pt": PageDefaults(
            title="Reservas Diretas Melhoradas | SmartHoster",
            description=(
                "Reservas diretas sem comissões para o seu alojamento: página de reservas otimizada, "
                "Google Business, pagamentos integrados e calendário em tempo real."
            ),
        ),
        "fr": PageDefaults(
            title="Réservations Directes Améliorées | SmartHoster",
            description=(
                "Des réservations directes sans commission : page de réservation optimisée, "
                "Google Business, paiements intégrés et calendrier en direct."
            ),
        ),
    },
    "/green-pledge": {
        "en": PageDefaults(
            title="Green Pledge | SmartHoster",
            description="Our commitment to sustainable short-term rentals in Portugal, from eco-friendly supplies to energy savings.",
        ),
        "pt": PageDefaults(
            title="Compromisso Verde | SmartHoster",
            description="O nosso compromisso com um Alojamento Local sustentável em Portugal, de produtos ecológicos à poupança de energia.",
        ),
        "fr": PageDefaults(
            title="Engagement Vert | SmartHoster",
            description="Notre engagement pour des locations courte durée durables au Portugal, des produits écologiques aux économies d'énergie.",
        ),
    },
    "/blog": {
        "en": PageDefaults(
            title="Blog | SmartHoster",
            description="Guides and news on short-term rentals, Alojamento Local and hosting in Portugal.",
        ),
        "pt": PageDefaults(
            title="Blog | SmartHoster",
            description="Guias e novidades sobre Alojamento Local e arrendamento de curta duração em Portugal.",
        ),
        "fr": PageDefaults(
            title="Blog | SmartHoster",
            description="Guides et actualités sur la location courte durée et l'Alojamento Local au Portugal.",
        ),
    },
}


def get_page_defaults(path: str, locale: str) -> PageDefaults:
    """Default SEO bundle for ``path`` in ``locale``.

    ``path`` may or may not carry a locale prefix. Unknown paths use the
    site-wide bundle; unsupported locales use the default locale.
    """
    locale = normalize_locale(locale)
    bundles = PAGE_DEFAULTS.get(strip_locale(path), SITE_DEFAULTS)
    return bundles.get(locale) or bundles[DEFAULT_LOCALE]
