"""Save a company through the real stack and load it back from disk."""

from company_track.adapters.db.engine import make_engine
from company_track.adapters.db.schema import create_schema
from company_track.adapters.unit_of_work import SqlAlchemyUnitOfWork
from company_track.bootstrap.bootstrap import load_company
from company_track.domain.aggregates import Company
from company_track.service_layer.repositories import CompanyRepository

# pylint: disable=magic-value-comparison


def test_saved_company_loads_in_a_new_session(sqlite_url_file, id_generator):
    """What one session commits, the next session reads back."""
    engine = make_engine(sqlite_url_file)
    create_schema(engine)
    company = Company(id_generator)
    company.add_department("Engineering ")
    company.add_department("sales")
    company.hire_employee("Alice", "engineering")
    company.hire_employee(" Bob ", "ENGINEERING")
    company.hire_employee("Dan", "sales")

    uow = SqlAlchemyUnitOfWork(engine)
    with uow:
        CompanyRepository(uow.store, id_generator).save(company)
        uow.commit()
    company.commit()
    engine.dispose()

    other_engine = make_engine(sqlite_url_file)
    try:
        loaded = load_company(SqlAlchemyUnitOfWork(other_engine), id_generator)
    finally:
        other_engine.dispose()

    assert set(loaded.departments) == set(company.departments)
    assert set(loaded.employees) == set(company.employees)
    assert loaded.get_total_employees() == 3
    assert not loaded.uncommitted_events
    engineering = loaded.find_department("engineering")
    assert loaded.get_employees_by_department(engineering.id) == 2
    assert {
        e.name for e in loaded.employees if e.department_id == engineering.id
    } == {"Alice", "Bob"}


def test_uncommitted_save_is_not_loaded(sqlite_engine_file, id_generator):
    """A save whose unit of work is not committed leaves no trace."""
    company = Company(id_generator)
    company.add_department("sales")
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with uow:
        CompanyRepository(uow.store, id_generator).save(company)

    assert not load_company(uow, id_generator).departments
    assert len(company.uncommitted_events) == 1
