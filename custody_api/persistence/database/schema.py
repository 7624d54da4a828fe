# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2026 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Define the ORM schema objects that map directly to the custody records
database.

The below schema uses only generic SQLAlchemy types, and therefore should be
portable between database implementations. The API never writes to these
tables; rows are owned by the upstream prison records system.

NOTE: Aliases are stored as additional rows in the OFFENDERS table whose
ALIAS_OFFENDER_ID points at the offender record they are an alias of.
"""
from sqlalchemy import (
    CHAR,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base, relationship

# Base class for all table classes
CustodyBase = declarative_base()


class ReferenceCode(CustodyBase):
    """Coded value with a human-readable description, scoped to a domain."""

    __tablename__ = "REFERENCE_CODES"

    domain = Column("DOMAIN", String(12), primary_key=True)
    code = Column("CODE", String(12), primary_key=True)
    description = Column("DESCRIPTION", String(40), nullable=False)
    active_flag = Column("ACTIVE_FLAG", CHAR(1), default="Y")


class AgencyLocation(CustodyBase):
    """An establishment (prison, court, etc.) records can be associated with."""

    __tablename__ = "AGENCY_LOCATIONS"

    agy_loc_id = Column("AGY_LOC_ID", String(6), primary_key=True)
    description = Column("DESCRIPTION", String(40))
    agency_location_type = Column("AGENCY_LOCATION_TYPE", String(12))
    active_flag = Column("ACTIVE_FLAG", CHAR(1))


class AgencyInternalLocation(CustodyBase):
    """A cell, wing or other location within an agency location."""

    __tablename__ = "AGENCY_INTERNAL_LOCATIONS"

    internal_location_id = Column("INTERNAL_LOCATION_ID", Integer, primary_key=True)
    agy_loc_id = Column(
        "AGY_LOC_ID", String(6), ForeignKey("AGENCY_LOCATIONS.AGY_LOC_ID")
    )
    internal_location_code = Column("INTERNAL_LOCATION_CODE", String(30))
    description = Column("DESCRIPTION", String(240))
    internal_location_type = Column("INTERNAL_LOCATION_TYPE", String(12))
    active_flag = Column("ACTIVE_FLAG", CHAR(1))

    agency_location = relationship("AgencyLocation")


class Offender(CustodyBase):
    """A person (or an alias record of a person) held in the records system."""

    __tablename__ = "OFFENDERS"

    offender_id = Column("OFFENDER_ID", Integer, primary_key=True)
    offender_id_display = Column("OFFENDER_ID_DISPLAY", String(10), index=True)
    root_offender_id = Column("ROOT_OFFENDER_ID", Integer)
    alias_offender_id = Column(
        "ALIAS_OFFENDER_ID", Integer, ForeignKey("OFFENDERS.OFFENDER_ID")
    )
    first_name = Column("FIRST_NAME", String(35))
    middle_name = Column("MIDDLE_NAME", String(35))
    middle_name_2 = Column("MIDDLE_NAME_2", String(35))
    last_name = Column("LAST_NAME", String(35))
    birth_date = Column("BIRTH_DATE", DateTime)
    sex_code = Column("SEX_CODE", String(12))
    race_code = Column("RACE_CODE", String(12))

    offender_bookings = relationship(
        "OffenderBooking", back_populates="offender", order_by="OffenderBooking.offender_book_id"
    )
    offender_identifiers = relationship(
        "OffenderIdentifier", order_by="OffenderIdentifier.offender_id_seq"
    )
    offender_aliases = relationship("Offender", order_by="Offender.offender_id")


class OffenderIdentifier(CustodyBase):
    """An external identifier (PNC number, CRO number, etc.) of an offender."""

    __tablename__ = "OFFENDER_IDENTIFIERS"

    offender_id = Column(
        "OFFENDER_ID", Integer, ForeignKey("OFFENDERS.OFFENDER_ID"), primary_key=True
    )
    offender_id_seq = Column("OFFENDER_ID_SEQ", Integer, primary_key=True)
    identifier_type = Column("IDENTIFIER_TYPE", String(12), nullable=False)
    identifier = Column("IDENTIFIER", String(20), nullable=False)
    create_datetime = Column("CREATE_DATETIME", DateTime)


class OffenderBooking(CustodyBase):
    """A single period of custody for an offender."""

    __tablename__ = "OFFENDER_BOOKINGS"

    offender_book_id = Column("OFFENDER_BOOK_ID", Integer, primary_key=True)
    offender_id = Column(
        "OFFENDER_ID", Integer, ForeignKey("OFFENDERS.OFFENDER_ID"), nullable=False
    )
    root_offender_id = Column("ROOT_OFFENDER_ID", Integer)
    booking_seq = Column("BOOKING_SEQ", Integer, nullable=False)
    booking_no = Column("BOOKING_NO", String(14))
    booking_begin_date = Column("BOOKING_BEGIN_DATE", DateTime, nullable=False)
    booking_end_date = Column("BOOKING_END_DATE", DateTime)
    active_flag = Column("ACTIVE_FLAG", CHAR(1), nullable=False)
    booking_status = Column("BOOKING_STATUS", String(12))
    status_reason = Column("STATUS_REASON", String(32))
    in_out_status = Column("IN_OUT_STATUS", String(12))
    agy_loc_id = Column(
        "AGY_LOC_ID", String(6), ForeignKey("AGENCY_LOCATIONS.AGY_LOC_ID")
    )
    living_unit_id = Column(
        "LIVING_UNIT_ID",
        Integer,
        ForeignKey("AGENCY_INTERNAL_LOCATIONS.INTERNAL_LOCATION_ID"),
    )
    case_date = Column("CASE_DATE", Date)
    # Only the time portion of CASE_TIME is significant
    case_time = Column("CASE_TIME", DateTime)

    offender = relationship("Offender", back_populates="offender_bookings")
    agency_location = relationship("AgencyLocation")
    living_unit = relationship("AgencyInternalLocation")
    offender_external_movements = relationship(
        "OffenderExternalMovement",
        back_populates="offender_booking",
        order_by="OffenderExternalMovement.movement_seq",
    )
    offender_charges = relationship(
        "OffenderCharge",
        back_populates="offender_booking",
        order_by="OffenderCharge.offender_charge_id",
    )


class OffenderExternalMovement(CustodyBase):
    """A movement of an offender into, out of or between establishments."""

    __tablename__ = "OFFENDER_EXTERNAL_MOVEMENTS"

    offender_book_id = Column(
        "OFFENDER_BOOK_ID",
        Integer,
        ForeignKey("OFFENDER_BOOKINGS.OFFENDER_BOOK_ID"),
        primary_key=True,
    )
    movement_seq = Column("MOVEMENT_SEQ", Integer, primary_key=True)
    movement_date = Column("MOVEMENT_DATE", Date, nullable=False)
    movement_time = Column("MOVEMENT_TIME", DateTime, nullable=False)
    movement_type = Column("MOVEMENT_TYPE", String(12))
    movement_direction = Column("DIRECTION_CODE", String(12))
    movement_reason_code = Column("MOVEMENT_REASON_CODE", String(12))
    from_agy_loc_id = Column("FROM_AGY_LOC_ID", String(6))
    to_agy_loc_id = Column("TO_AGY_LOC_ID", String(6))
    active_flag = Column("ACTIVE_FLAG", CHAR(1))
    comment_text = Column("COMMENT_TEXT", String(240))
    create_datetime = Column("CREATE_DATETIME", DateTime)

    offender_booking = relationship(
        "OffenderBooking", back_populates="offender_external_movements"
    )


class OffenderCharge(CustodyBase):
    """A criminal charge associated with a booking."""

    __tablename__ = "OFFENDER_CHARGES"

    offender_charge_id = Column("OFFENDER_CHARGE_ID", Integer, primary_key=True)
    offender_book_id = Column(
        "OFFENDER_BOOK_ID",
        Integer,
        ForeignKey("OFFENDER_BOOKINGS.OFFENDER_BOOK_ID"),
        nullable=False,
    )
    offence_code = Column("OFFENCE_CODE", String(25))
    statute_code = Column("STATUTE_CODE", String(12))
    charge_status = Column("CHARGE_STATUS", String(12))
    most_serious_flag = Column("MOST_SERIOUS_FLAG", CHAR(1), nullable=False, default="N")
    offence_severity_ranking = Column("OFFENCE_SEVERITY_RANKING", Integer)
    offence_date = Column("OFFENCE_DATE", Date)
    plea_code = Column("PLEA_CODE", String(12))
    no_of_offences = Column("NO_OF_OFFENCES", Integer)
    create_datetime = Column("CREATE_DATETIME", DateTime)

    offender_booking = relationship(
        "OffenderBooking", back_populates="offender_charges"
    )
