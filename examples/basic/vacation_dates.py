"""Build a parameterized SQL statement across a loop.

Run: python examples/basic/vacation_dates.py
"""

from datetime import date, timedelta

from formattable import FormattableStringBuilder, Value


def main() -> None:
    today = date.today()
    dates = [today + timedelta(days=i) for i in range(3)]

    fsb = FormattableStringBuilder()
    fsb.append("INSERT INTO dbo.VacationDates (Date)").append_line().append("VALUES")
    for i, d in enumerate(dates):
        fsb.append_line().append("(", Value(d, format="%Y-%m-%d"), ")")
        if i < len(dates) - 1:
            fsb.append(",")

    fs = fsb.build()
    print(fs.format)
    print(fs.arguments)
    print(fs.render())


if __name__ == "__main__":
    main()
