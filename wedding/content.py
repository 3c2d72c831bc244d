"""
Static wedding content: couple, venue, texts, programme and game definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Location:
    venue: str
    neighborhood: str
    city: str
    province: str
    map_url: str
    waze_url: str
    lat: str
    lng: str
    address: Optional[str] = None


@dataclass(frozen=True)
class Couple:
    groom_name: str
    bride_name: str
    wedding_date: str
    location: Location


@dataclass(frozen=True)
class BankDetails:
    alias: str
    cbu: str
    holder_name: str


@dataclass(frozen=True)
class DefaultMilestone:
    date: str
    title: str
    description: str
    image_url: str
    spotify_url: Optional[str] = None


@dataclass(frozen=True)
class BingoChallenge:
    id: int
    challenge: str


@dataclass(frozen=True)
class ProgrammeItem:
    time: str
    title: str
    description: str
    icon: str


@dataclass(frozen=True)
class SurveyQuestion:
    id: int
    question: str
    options: tuple[str, ...]


@dataclass(frozen=True)
class TriviaQuestion:
    id: int
    question: str
    options: tuple[str, ...]
    answer: int


@dataclass(frozen=True)
class WeddingContent:
    couple: Couple
    bank_details: BankDetails
    thank_you_text: str
    collaboration_text: str
    history: tuple[DefaultMilestone, ...]
    bingo_challenges: tuple[BingoChallenge, ...]
    programme: tuple[ProgrammeItem, ...]
    survey_questions: tuple[SurveyQuestion, ...]
    trivia_questions: tuple[TriviaQuestion, ...]
    suggested_tasks: tuple[str, ...] = field(default_factory=tuple)

    def bingo_challenge(self, challenge_id: int) -> Optional[BingoChallenge]:
        for challenge in self.bingo_challenges:
            if challenge.id == challenge_id:
                return challenge
        return None


# Placeholder values in the defaults start with "[" and are hidden from guests.
PLACEHOLDER_PREFIX = "["

MESSAGE_EMOJIS = ("❤️", "🥂", "🎉", "💍", "✨", "🥰")
DEFAULT_MESSAGE_EMOJI = "❤️"

WEDDING = WeddingContent(
    couple=Couple(
        groom_name="Julian",
        bride_name="Jacqueline",
        wedding_date="2026-02-21",
        location=Location(
            venue="Quinta de Vero y Pablo",
            address="Calle 617, n° 5176",
            neighborhood="El Pato",
            city="Berazategui",
            province="Buenos Aires",
            map_url="https://maps.app.goo.gl/PPZn9vsMf2qnAMQo8?g_st=aw",
            waze_url="https://waze.com/ul?ll=-34.890674,-58.149847&navigate=yes",
            lat="-34.890674",
            lng="-58.149847",
        ),
    ),
    bank_details=BankDetails(
        alias="casapupis",
        cbu="",
        holder_name="Julian Martin Alonso / Jacqueline Messmer",
    ),
    thank_you_text=(
        "Queremos agradecer a nuestra familia y amigos quienes nos acompañaron "
        "para hacer posible este evento, pero sobretodo a Vero y Pablo que nos "
        "prestaron su quinta. Su carino y apoyo hacen posible este festejo. "
        "Gracias de corazon!"
    ),
    collaboration_text=(
        "Te pedimos tener cuidado con las instalaciones y si llegas a notar que "
        "algo se rompio, avisanos! Ademas, si queres colaborar con nosotros, con "
        "los gastos de limpieza o reparacion, te dejamos nuestros datos. No es "
        "una obligacion, tu presencia es el mejor regalo."
    ),
    history=(
        DefaultMilestone(
            date="[COMPLETAR_FECHA]",
            title="Nos conocimos",
            description=(
                "El destino nos cruzo y desde ese momento supimos que algo "
                "especial estaba por comenzar."
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
        DefaultMilestone(
            date="[COMPLETAR_FECHA]",
            title="Primera cita",
            description=(
                "Nervios, risas y la certeza de que queriamos seguir conociéndonos."
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
        DefaultMilestone(
            date="[COMPLETAR_FECHA]",
            title="Primer viaje juntos",
            description=(
                "Descubrimos que viajar juntos era tan natural como respirar. "
                "La aventura recien empezaba."
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
        DefaultMilestone(
            date="[COMPLETAR_FECHA]",
            title="Nos mudamos juntos",
            description=(
                "Armamos nuestro hogar, un lugar lleno de amor, proyectos y "
                "suenos compartidos."
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
        DefaultMilestone(
            date="[COMPLETAR_FECHA]",
            title="La propuesta",
            description=(
                "Con el corazon latiendo a mil, llego la pregunta mas importante. "
                "Y la respuesta fue si!"
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
        DefaultMilestone(
            date="2026-02-21",
            title="Nos casamos!",
            description=(
                "El gran dia llego. Rodeados de quienes mas queremos, celebramos "
                "nuestro amor para siempre."
            ),
            image_url="[COMPLETAR_IMAGE_URL]",
        ),
    ),
    bingo_challenges=(
        BingoChallenge(1, "Foto con los novios"),
        BingoChallenge(2, "Alguien bailando"),
        BingoChallenge(3, "El brindis"),
        BingoChallenge(4, "Un abrazo grupal"),
        BingoChallenge(5, "Los zapatos de la novia"),
        BingoChallenge(6, "Foto con el DJ"),
        BingoChallenge(7, "Un selfie en el espejo"),
        BingoChallenge(8, "La torta"),
        BingoChallenge(9, "Un invitado llorando de emocion"),
        BingoChallenge(10, "El ramo de la novia"),
        BingoChallenge(11, "Foto grupal de amigos"),
        BingoChallenge(12, "Los anillos"),
        BingoChallenge(13, "Alguien cantando"),
        BingoChallenge(14, "Una foto divertida"),
        BingoChallenge(15, "El primer baile"),
        BingoChallenge(16, "La familia completa"),
    ),
    programme=(
        ProgrammeItem(
            "16:00",
            "Recepcion",
            "Llegada de los invitados. Los esperamos con una bienvenida especial.",
            "DoorOpen",
        ),
        ProgrammeItem(
            "17:00",
            "Ceremonia",
            "El momento mas emotivo: nos damos el si rodeados de nuestros seres queridos.",
            "Heart",
        ),
        ProgrammeItem(
            "17:30",
            "Brindis",
            "Levantamos las copas para celebrar este nuevo comienzo juntos.",
            "Wine",
        ),
        ProgrammeItem(
            "18:00",
            "Cena",
            "A disfrutar de una noche deliciosa compartiendo la mesa con familia y amigos.",
            "UtensilsCrossed",
        ),
        ProgrammeItem(
            "19:00",
            "Primer baile",
            "Nuestro primer baile como esposos. Un momento para recordar siempre.",
            "Music",
        ),
        ProgrammeItem(
            "19:30",
            "Fiesta",
            "A bailar toda la noche! La pista es de todos. Que no pare la musica!",
            "PartyPopper",
        ),
    ),
    survey_questions=(
        SurveyQuestion(
            1,
            "¿Quién va a llorar primero en la ceremonia?",
            ("Julian", "Jacqueline", "Los dos", "Ninguno"),
        ),
        SurveyQuestion(
            2,
            "¿Qué momento de la fiesta esperás más?",
            ("El primer baile", "La cena", "El brindis", "La pista"),
        ),
        SurveyQuestion(
            3,
            "¿A qué hora creés que termina la fiesta?",
            ("Antes de las 2", "Entre 2 y 4", "Después de las 4", "Al amanecer"),
        ),
    ),
    trivia_questions=(
        TriviaQuestion(
            1,
            "¿Dónde se conocieron los novios?",
            ("En la facultad", "En un viaje", "Por amigos", "En el trabajo"),
            2,
        ),
        TriviaQuestion(
            2,
            "¿Quién dio el primer paso?",
            ("Julian", "Jacqueline"),
            0,
        ),
        TriviaQuestion(
            3,
            "¿Cuál fue su primer viaje juntos?",
            ("Bariloche", "Mendoza", "Uruguay", "Brasil"),
            3,
        ),
    ),
    suggested_tasks=(
        "Confirmar catering / menu",
        "Probar vestido / traje",
        "Definir lista de invitados",
        "Encargar torta",
        "Reservar DJ / banda",
        "Comprar alianzas",
        "Confirmar fotografo/a",
        "Organizar traslados",
        "Definir decoracion",
        "Preparar votos",
        "Imprimir invitaciones",
        "Confirmar ceremonia civil",
    ),
)


def is_placeholder(value: Optional[str]) -> bool:
    return bool(value) and value.startswith(PLACEHOLDER_PREFIX)
