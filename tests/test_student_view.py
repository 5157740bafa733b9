from services.student_view import (
    distinct_programs,
    encode_student_id,
    filter_students,
    render_load_error,
    render_program_options,
    render_table,
)

ANN = {"Student ID": "S1", "Full Name": "Ann Lee", "Program": "CS", "Gender": "F"}
BOB = {"Student ID": "S2", "Full Name": "Bob Diaz", "Program": "IT", "Gender": "M"}


def test_search_matches_name_substring():
    assert filter_students([ANN, BOB], search="an") == [ANN]


def test_gender_filter_with_empty_search():
    assert filter_students([ANN, BOB], gender="M") == [BOB]


def test_search_is_case_insensitive_and_covers_program():
    assert filter_students([ANN, BOB], search="It") == [BOB]
    assert filter_students([ANN, BOB], search="LEE") == [ANN]


def test_program_filter_is_exact():
    assert filter_students([ANN, BOB], program="CS") == [ANN]
    assert filter_students([ANN, BOB], program="C") == []


def test_filters_combine():
    assert filter_students([ANN, BOB], search="o", gender="M", program="IT") == [BOB]
    assert filter_students([ANN, BOB], search="ann", gender="M") == []


def test_no_criteria_keeps_everything_and_input():
    records = [ANN, BOB]

    assert filter_students(records) == records
    assert records == [ANN, BOB]


def test_distinct_programs_keep_first_occurrence_order():
    records = [BOB, ANN, {"Program": "IT"}, {"Program": "EE"}]

    assert distinct_programs(records) == ["IT", "CS", "EE"]


def test_render_table_one_row_per_record():
    table = render_table([ANN, BOB])

    assert table.count == 2
    assert table.html.count("<tr") == 2
    assert 'title="Ann Lee"' in table.html
    assert table.html.count('class="deleteBtn') == 2


def test_render_table_placeholder_for_empty_or_invalid_input():
    for value in ([], None, {"Student ID": "S1"}):
        table = render_table(value)
        assert table.count == 0
        assert "No records found" in table.html


def test_render_table_escapes_values():
    table = render_table([{**ANN, "Full Name": "<b>Ann</b>"}])

    assert "<b>" not in table.html
    assert "&lt;b&gt;Ann&lt;/b&gt;" in table.html


def test_delete_button_carries_encoded_id():
    table = render_table([{**ANN, "Student ID": "2024/07 A"}])

    assert 'data-id="2024%2F07%20A"' in table.html


def test_encode_student_id_matches_uri_component_rules():
    assert encode_student_id("a-b_c.d!~*'()") == "a-b_c.d!~*'()"
    assert encode_student_id("a b&c") == "a%20b%26c"


def test_load_error_placeholder():
    table = render_load_error()

    assert table.count == 0
    assert "Could not load students." in table.html


def test_program_options_start_with_all():
    html = render_program_options(["CS", "IT"])

    assert html.startswith('<option value="">All Programs</option>')
    assert "<option>CS</option><option>IT</option>" in html
