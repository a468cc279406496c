"""Read-only summary statistics for the admin dashboard."""

from sqlalchemy import func, select

from showroom.models import Contact, Product


class DashboardService:

    def __init__(self, session, recent_limit=5):
        self.session = session
        self.recent_limit = recent_limit

    def counts(self):
        """All four counters in one statement of scalar subqueries."""
        statement = select(
            select(func.count(Contact.id)).scalar_subquery().label('totalContacts'),
            select(func.count(Contact.id)).where(Contact.status == 'new')
            .scalar_subquery().label('newContacts'),
            select(func.count(Product.id)).scalar_subquery().label('totalProducts'),
            select(func.count(Product.id)).where(Product.is_active.is_(True))
            .scalar_subquery().label('activeProducts'),
        )
        row = self.session.execute(statement).one()
        return dict(row._mapping)

    def recent_contacts(self):
        contacts = self.session.query(Contact).order_by(
            Contact.created_at.desc(), Contact.id.desc()
        ).limit(self.recent_limit).all()
        return [contact.to_summary() for contact in contacts]

    def status_distribution(self):
        rows = self.session.query(
            Contact.status, func.count(Contact.id)
        ).group_by(Contact.status).all()
        return {status: count for status, count in rows}

    def summary(self):
        return {
            'stats': self.counts(),
            'recentContacts': self.recent_contacts(),
            'contactStatusDistribution': self.status_distribution(),
        }
