"""Body content blocks for landing pages.

Search engines penalize near-duplicate pages that only swap a name in a
heading. Every paragraph, question and answer below interpolates the
entry's city, niche or neighborhood into the sentence itself, so no two
entries of the same kind produce identical text.
"""

from dataclasses import dataclass

from seolocal.core.metadata import neighborhood_place
from seolocal.core.types import EntryKind, PageEntry, effective_kind

DEFAULT_PRODUCT = "ProspectorAI"

# Shared methodology section, identical on every page
INSTITUTIONAL_BLOCK: tuple[str, ...] = (
    "A plataforma usa dados estruturados e atualizados: você filtra por nicho e região, "
    "vê quantidade de empresas por segmento, presença digital (site e telefone) e ranking "
    "competitivo. Nos planos Growth e Enterprise, a IA sugere script de ligação, e-mail e "
    "WhatsApp por lead. Exporte em CSV ou JSON, trabalhe em equipe com workspaces e proteja "
    "a conta com 2FA.",
)


@dataclass(frozen=True)
class FaqItem:
    """Question and answer pair."""

    question: str
    answer: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"question": self.question, "answer": self.answer}


def get_intro_block(entry: PageEntry, *, product: str = DEFAULT_PRODUCT) -> list[str]:
    """Build the introduction paragraphs.

    Structure and focus differ per kind (city-wide, niche-in-city,
    neighborhood), not just the substituted name.

    Args:
        entry: Page entry
        product: Product name used in the copy

    Returns:
        Two paragraphs for known kinds, one generic paragraph otherwise
    """
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        city = entry.city
        return [
            f"A região de {city} concentra milhares de empresas ativas. Para quem vende B2B "
            f"em {city}, a dúvida é: onde atacar primeiro, com qual mensagem e como priorizar "
            "leads.",
            f"O {product} reúne, para {city}, busca por nicho e endereço, análise de "
            "concorrência local e sugestões de abordagem com IA. Você filtra por segmento, vê "
            "quem tem site e telefone, e exporta listas para seu CRM.",
        ]
    if kind is EntryKind.CITY_NICHE:
        niche, city = entry.niche, entry.city
        return [
            f"Prospectar {niche} em {city} exige saber quem já atua na região, quem tem "
            "presença digital e onde há espaço para novos fornecedores.",
            f"Com o {product} você mapeia {niche} por área de {city}, analisa concorrência e "
            "recebe sugestões de primeiro contato (ligação, e-mail, WhatsApp) com base no "
            "perfil de cada lead.",
        ]
    if kind is EntryKind.NEIGHBORHOOD:
        place = neighborhood_place(entry)
        return [
            "Trabalhar por bairro permite campanhas mais focadas e mensagens adaptadas ao "
            f"perfil local. {place} concentra uma grande quantidade de negócios.",
            f"A plataforma permite listar empresas de {entry.neighborhood}, filtrar por nicho "
            "e priorizar leads com score de potencial. Os dados vêm de fontes estruturadas e "
            "são atualizados regularmente.",
        ]
    return [
        f"O {product} combina busca por nicho e região, análise de concorrência local e "
        "inteligência comercial para gerar leads B2B qualificados.",
    ]


def get_local_block(entry: PageEntry) -> list[str]:
    """Build the "what you can do here" paragraphs.

    Returns:
        Two paragraphs for known kinds, empty for fallback entries
    """
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        city = entry.city
        return [
            f"Em {city} você pode usar a ferramenta para filtrar empresas por segmento (ex.: "
            "saúde, comércio, serviços), ver quantas têm site e telefone cadastrado e exportar "
            "listas para campanhas.",
            f"A análise de concorrência mostra quem está mais visível em {city} e onde há "
            "oportunidades para quem está entrando. Os relatórios ajudam a decidir em quais "
            "bairros ou nichos concentrar esforço.",
        ]
    if kind is EntryKind.CITY_NICHE:
        niche, city = entry.niche, entry.city
        return [
            f"Para {niche} em {city}, a plataforma permite mapear todos os negócios do "
            "segmento na área, ver avaliações e presença digital, e ranquear por relevância.",
            "Você gera scripts de ligação e mensagens de primeiro contato personalizadas "
            f"para cada lead de {niche} em {city}, o que reduz tempo de preparação e aumenta "
            "a chance de conversão em reunião ou proposta.",
        ]
    if kind is EntryKind.NEIGHBORHOOD:
        neighborhood = entry.neighborhood
        return [
            f"Em {neighborhood} é possível listar empresas por categoria, ver quais têm site "
            "e telefone e priorizar por potencial de compra.",
            f"Os dados de {neighborhood} vêm da plataforma (não são inventados), o que "
            "garante que suas campanhas se baseiem em informações atualizadas e acionáveis.",
        ]
    return []


def get_faq_block(entry: PageEntry, *, product: str = DEFAULT_PRODUCT) -> list[FaqItem]:
    """Build the FAQ for a page.

    The entry's names appear in both questions and answers, so FAQ
    structured data stays unique per page.

    Args:
        entry: Page entry
        product: Product name used in the copy

    Returns:
        Three items for city and niche-in-city pages, two for neighborhood
        pages, empty for fallback entries
    """
    kind = effective_kind(entry)
    if kind is EntryKind.CITY:
        city = entry.city
        return [
            FaqItem(
                question=f"Como encontrar empresas em {city} para prospecção B2B?",
                answer=(
                    f"No {product} você busca por nicho e região. Informe o segmento (ex.: "
                    f"clínicas, escritórios, comércio) e a área ({city} ou bairros). A "
                    "ferramenta lista empresas com filtros por site, telefone e exportação "
                    "em CSV ou JSON."
                ),
            ),
            FaqItem(
                question=f"A ferramenta usa dados reais para {city}?",
                answer=(
                    "Sim. A plataforma utiliza fontes estruturadas e atualizadas. Você vê "
                    "quantidade de empresas por segmento, presença digital e ranking "
                    f"competitivo em {city}, sem números inventados."
                ),
            ),
            FaqItem(
                question=f"Posso exportar listas de leads em {city}?",
                answer=(
                    f"Sim. Nos planos pagos você exporta listas de {city} em CSV ou JSON para "
                    "usar no CRM ou em campanhas. A exportação inclui dados de contato e "
                    "notas da análise de IA quando disponíveis."
                ),
            ),
        ]
    if kind is EntryKind.CITY_NICHE:
        niche, city = entry.niche, entry.city
        return [
            FaqItem(
                question=f"Como prospectar {niche} em {city}?",
                answer=(
                    f'No {product} você filtra por segmento "{niche}" e região "{city}". A '
                    "lista mostra empresas do nicho com opção de ver análise de concorrência, "
                    "presença digital e sugestão de primeiro contato (ligação, e-mail, "
                    "WhatsApp)."
                ),
            ),
            FaqItem(
                question=f"A plataforma sugere abordagem para cada lead de {niche} em {city}?",
                answer=(
                    "Sim. Nos planos Growth e Enterprise a IA gera script de ligação, e-mail e "
                    f"mensagem WhatsApp adaptados ao perfil do lead e ao nicho de {niche}, "
                    f"para você não começar do zero em {city}."
                ),
            ),
            FaqItem(
                question=f"Posso trabalhar em equipe na prospecção de {niche} em {city}?",
                answer=(
                    f"Sim. O {product} tem workspaces: você convida membros, divide listas de "
                    f"{niche} em {city} e acompanha resultados. Exportação e 2FA estão "
                    "disponíveis nos planos pagos."
                ),
            ),
        ]
    if kind is EntryKind.NEIGHBORHOOD:
        neighborhood = entry.neighborhood
        return [
            FaqItem(
                question=f"Como listar empresas por bairro em {neighborhood}?",
                answer=(
                    f"No {product} você escolhe o bairro ({neighborhood}) e filtra por "
                    "segmento. A lista mostra empresas com dados de contato e, quando "
                    "disponível, análise de concorrência e sugestão de abordagem."
                ),
            ),
            FaqItem(
                question=f"Os dados de {neighborhood} são reais?",
                answer=(
                    "Sim. A plataforma usa fontes estruturadas; não inventamos endereços nem "
                    f"perfis em {neighborhood}. Os números e listas refletem dados que você "
                    "pode validar na ferramenta."
                ),
            ),
        ]
    return []
