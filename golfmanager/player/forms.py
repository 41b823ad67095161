"""Forms for the player blueprint."""

from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

from golfmanager.core.constants import MAX_HANDICAP, MIN_HANDICAP


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class PlayerForm(FlaskForm):
    """Form for creating or editing a player."""

    name = StringField(
        "Name",
        filters=[_strip],
        validators=[DataRequired(), Length(max=80)],
    )
    handicap = IntegerField(
        "Handicap",
        default=0,
        validators=[
            InputRequired(),
            NumberRange(
                min=MIN_HANDICAP,
                max=MAX_HANDICAP,
                message=f"Handicap must be between {MIN_HANDICAP} and {MAX_HANDICAP}",
            ),
        ],
    )
