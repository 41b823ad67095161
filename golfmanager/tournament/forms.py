"""Forms for the tournament blueprint."""

import datetime

from flask_wtf import FlaskForm
from wtforms import DateField, IntegerField, SelectField, StringField
from wtforms.validators import DataRequired, InputRequired, NumberRange

from golfmanager.core.constants import MAX_STROKES, MIN_STROKES
from golfmanager.gateway.models import (
    FORMAT_LABELS,
    STATUS_LABELS,
    TournamentFormat,
)


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class TournamentForm(FlaskForm):
    """Form for creating a tournament."""

    name = StringField(
        "Tournament Name", filters=[_strip], validators=[DataRequired()]
    )
    date = DateField("Date", default=datetime.date.today, validators=[DataRequired()])
    location = StringField("Location", filters=[_strip], validators=[DataRequired()])
    format = SelectField(
        "Format",
        choices=[(f.value, label) for f, label in FORMAT_LABELS.items()],
        default=TournamentFormat.STROKE_PLAY.value,
        validators=[DataRequired()],
    )


class EditTournamentForm(TournamentForm):
    """Form for editing a tournament, including its status."""

    status = SelectField(
        "Status",
        choices=[(s.value, label) for s, label in STATUS_LABELS.items()],
        validators=[DataRequired()],
    )


class RegisterPlayerForm(FlaskForm):
    """Form for adding a player to a tournament."""

    player_id = SelectField("Player", validators=[DataRequired()])


class ScoreForm(FlaskForm):
    """Form posted by the +/- buttons of a scorecard hole."""

    strokes = IntegerField(
        "Strokes",
        validators=[
            InputRequired(),
            NumberRange(
                min=MIN_STROKES,
                max=MAX_STROKES,
                message=f"Strokes must be between {MIN_STROKES} and {MAX_STROKES}.",
            ),
        ],
    )
