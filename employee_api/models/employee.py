"""직원 SQLAlchemy ORM 모델 정의.

Employee SQLAlchemy ORM model definition.

Tables:
    - employees: 직원 레코드 (Employee records)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """직원 모델.

    Employee model. The primary key is generated by the store on insert
    and never changes afterwards; an instance whose id is None is unsaved.
    Email is not unique at the schema level.

    Attributes:
        id: 고유 식별자 (Store-generated integer identifier)
        first_name: 이름 (First name, required)
        last_name: 성 (Last name, required)
        email: 이메일 (Email address, required)
    """

    __tablename__ = "employees"

    # 직원 고유 식별자: autoincrement integer, assigned on first insert
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Employee(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}', email='{self.email}')>"
        )
