"""Unit tests for CSV parser module."""

from unittest.mock import patch

import pytest

from resident_roster.csv_parser.parser import load_residents, parse_csv
from resident_roster.csv_parser.validator import validate_residents
from resident_roster.models.resident import CodeStatus, ResidentStatus
from resident_roster.utils.date_only import DateComponents
from resident_roster.utils.exceptions import ValidationError

HEADER = "first_name,last_name,room_number,dob,status\n"


class TestParseCSVValidData:
    """Test parsing valid CSV data."""

    def test_parse_csv_with_required_columns_only(self, tmp_path):
        """Test parsing CSV with only required columns."""
        # Arrange
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            HEADER
            + "Harold,Adams,10,1941-07-04,active\n"
            + "Margaret,Zane,010,1938-04-12,discharged\n",
            encoding="utf-8",
        )

        # Act
        df, validation_result = parse_csv(csv_file)

        # Assert
        assert len(df) == 2
        assert df.iloc[0]["first_name"] == "Harold"
        assert df.iloc[0]["room_number"] == "10"
        assert df.iloc[1]["room_number"] == "010"
        assert df.iloc[1]["dob"] == "1938-04-12"
        assert validation_result is not None

    def test_parse_csv_generates_missing_resident_ids(self, tmp_path):
        """Test sequential IDs are generated and skip provided ones."""
        # Arrange
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "resident_id,first_name,last_name,room_number,dob,status\n"
            ",Harold,Adams,10,1941-07-04,active\n"
            "R-0001,Margaret,Zane,11,1938-04-12,active\n"
            ",Edith,Baker,12,1935-11-30,active\n",
            encoding="utf-8",
        )

        # Act
        df, result = parse_csv(csv_file)

        # Assert
        assert df["resident_id"].tolist() == ["R-0002", "R-0001", "R-0003"]
        assert not result.has_errors

    def test_parse_csv_creates_resident_id_column(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER + "Harold,Adams,10,1941-07-04,active\n", encoding="utf-8")

        df, _ = parse_csv(csv_file)

        assert df.iloc[0]["resident_id"] == "R-0001"

    def test_parse_csv_normalizes_status_and_code_status(self, tmp_path):
        """Test status and code_status are case-insensitive."""
        # Arrange
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "first_name,last_name,room_number,dob,status,code_status\n"
            "Harold,Adams,10,1941-07-04,ACTIVE,DNR\n"
            "Margaret,Zane,11,1938-04-12,Discharged,fullcode\n",
            encoding="utf-8",
        )

        # Act
        df, _ = parse_csv(csv_file)

        # Assert
        assert df["status"].tolist() == ["active", "discharged"]
        assert df["code_status"].tolist() == ["dnr", "fullCode"]

    def test_parse_csv_strips_whitespace(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            HEADER.replace(",", " , ") + " Harold , Adams , 10A , 1941-07-04 , active \n",
            encoding="utf-8",
        )

        df, _ = parse_csv(csv_file)

        assert df.iloc[0]["room_number"] == "10A"
        assert df.iloc[0]["status"] == "active"

    def test_malformed_dob_is_not_an_error(self, tmp_path):
        """Test a bad DOB only produces a warning."""
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER + "Dorothy,Evans,2,not-a-date,active\n", encoding="utf-8")

        df, result = parse_csv(csv_file)

        assert df.iloc[0]["dob"] == "not-a-date"
        assert not result.has_errors
        assert result.has_warnings

    def test_parse_without_validation(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER + "Harold,Adams,10,1941-07-04,active\n", encoding="utf-8")

        _, result = parse_csv(csv_file, validate=False)

        assert result is None

    def test_header_only_file(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER, encoding="utf-8")

        df, result = parse_csv(csv_file)

        assert len(df) == 0
        assert result.total_rows == 0

    def test_unknown_columns_are_logged(self, tmp_path, caplog):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "first_name,last_name,room_number,dob,status,favorite_color\n"
            "Harold,Adams,10,1941-07-04,active,blue\n",
            encoding="utf-8",
        )

        with caplog.at_level("WARNING"):
            parse_csv(csv_file)

        assert "favorite_color" in caplog.text


class TestParseCSVValidationErrors:
    """Test CSV validation error handling."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_csv(tmp_path / "missing.csv")

    def test_empty_file(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text("", encoding="utf-8")

        with pytest.raises(ValidationError, match="Failed to read CSV file"):
            parse_csv(csv_file)

    def test_missing_required_column(self, tmp_path):
        # Arrange
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "first_name,last_name,dob,status\nHarold,Adams,1941-07-04,active\n",
            encoding="utf-8",
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            parse_csv(csv_file)

        assert "Missing required columns: room_number" in str(exc_info.value)

    def test_errors_are_aggregated(self, tmp_path):
        """Test all row errors are reported together."""
        # Arrange
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "first_name,last_name,room_number,dob,status,code_status\n"
            "Harold,Adams,,1941-07-04,active,\n"
            ",Zane,11,1938-04-12,pending,\n"
            "Edith,Baker,12,1935-11-30,active,maybe\n",
            encoding="utf-8",
        )

        # Act
        with pytest.raises(ValidationError) as exc_info:
            parse_csv(csv_file)

        # Assert
        message = str(exc_info.value)
        assert "Found 4 validation error(s)" in message
        assert "Row 2: Missing required field 'room_number'" in message
        assert "Row 3: Missing required field 'first_name'" in message
        assert "Row 3: Invalid status 'pending'" in message
        assert "Row 4: Invalid code_status 'maybe'" in message

    def test_missing_status_value(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER + "Harold,Adams,10,1941-07-04,\n", encoding="utf-8")

        with pytest.raises(ValidationError, match="Missing required field 'status'"):
            parse_csv(csv_file)


class TestLoadResidents:
    """Test conversion to Resident objects."""

    def test_load_sample_roster(self, sample_roster_csv):
        residents = load_residents(sample_roster_csv)

        assert len(residents) == 6
        zane = residents[0]
        assert zane.resident_id == "R-1001"
        assert zane.full_name == "Zane, Margaret"
        assert zane.status is ResidentStatus.DISCHARGED
        assert zane.code_status is CodeStatus.DNR
        assert zane.bed == "A"
        assert zane.medicare_number is None

    def test_optional_empty_values_become_none(self, sample_roster_csv):
        evans = load_residents(sample_roster_csv)[4]

        assert evans.last_name == "Evans"
        assert evans.code_status is None
        assert evans.age() is None

    def test_duplicate_resident_ids_raise(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(
            "resident_id,first_name,last_name,room_number,dob,status\n"
            "R-1,Harold,Adams,10,1941-07-04,active\n"
            "R-1,Margaret,Zane,11,1938-04-12,active\n",
            encoding="utf-8",
        )

        with pytest.raises(ValidationError, match="Duplicate resident_id found: R-1"):
            load_residents(csv_file)


class TestReferenceDate:
    """Test the age plausibility check follows the caller's reference date."""

    def _write(self, tmp_path):
        csv_file = tmp_path / "residents.csv"
        csv_file.write_text(HEADER + "Harold,Adams,10,2010-05-01,active\n", encoding="utf-8")
        return csv_file

    def test_parse_csv_checks_ages_against_given_date(self, tmp_path):
        # Arrange
        csv_file = self._write(tmp_path)

        # Act
        _, result = parse_csv(csv_file, today=DateComponents(2005, 1, 1))

        # Assert
        assert result.unknown_age_count == 1
        assert "gives an age outside 0-150" in result.all_warnings[0].message

    def test_parse_csv_defaults_to_local_date(self, tmp_path):
        _, result = parse_csv(self._write(tmp_path))

        assert not result.has_warnings

    def test_load_residents_passes_reference_date(self, tmp_path):
        csv_file = self._write(tmp_path)

        with patch(
            "resident_roster.csv_parser.parser.validate_residents",
            wraps=validate_residents,
        ) as mock_validate:
            load_residents(csv_file, today=DateComponents(2005, 1, 1))

        assert mock_validate.call_args[0][1] == DateComponents(2005, 1, 1)
